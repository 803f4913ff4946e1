import os

from tagtree.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['TAGTREE_CONFIG_YAML'] = os.environ.get('TAGTREE_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
