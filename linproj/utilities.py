"""linproj package utilities module"""

import json
import os


def load_config(config_path=None) -> dict:
    """Load package configuration file.

    By default the config.json file shipped alongside this module is used. A
    different file can be specified; any keys it omits fall back to the
    packaged defaults.
    """

    # Get path to default config file
    default_path = os.path.join(os.path.dirname(__file__), 'config.json')
    with open(default_path, 'rb') as f:
        config = json.load(f)

    # Overlay user-specified config
    if config_path is not None:
        with open(config_path, 'rb') as f:
            config.update(json.load(f))

    return config
