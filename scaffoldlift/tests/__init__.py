# This file is part of ScaffoldLift.
#
# Licensed under MIT License.

import os
TEST_DATA_DIR = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'data')
