# This file is part of ScaffoldLift.
#
# Licensed under MIT License.
