import configparser
import os

from robot.libraries.BuiltIn import BuiltIn
from robot.libraries.BuiltIn import RobotNotRunningError

from volume_metadata.utility.constant import CONFIG_FILE_PATH


_settings = {}


def load_settings(path=None, reload=False):
    path = path or os.environ.get('VOLUME_METADATA_CONFIG', CONFIG_FILE_PATH)
    if path in _settings and not reload:
        return _settings[path]

    config = configparser.ConfigParser()
    config.read(path, encoding='utf-8')
    section_name = "DEFAULT"
    if 'CUSTOM' in config.sections():
        section_name = "CUSTOM"
    _settings[path] = dict(config[section_name])
    return _settings[path]


def get_robot_variable(name):
    try:
        return BuiltIn().get_variable_value(f"${{{name}}}")
    except RobotNotRunningError:
        return None


def get_setting(name, default=None, settings_path=None):
    """
    Look a setting up in a Robot variable, then the environment, then
    settings.ini. configparser lowercases option names.
    """
    value = get_robot_variable(name)
    if value is None:
        value = os.environ.get(name)
    if value is None:
        value = load_settings(settings_path).get(name.lower())
    if value is None:
        return default
    return value
