import toml
import os
from .cli_logger import logger

CONFIG_FILE = "classpathfinder.toml"

# Defaults for the [classpath] table
DEFAULT_SETTINGS = {
    "stdlib_group": "org.jetbrains.kotlin",
    "stdlib_artifact": "kotlin-stdlib",
    "stdlib_marker": "kotlin-stdlib",
    "output_dirs": ["build/classes/kotlin/main", "target/classes/kotlin/main"],
    "exclude_dirs": [".git"],
    "maven_home": None,
    "gradle_home": None,
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        logger.debug(f"Loading configuration from {config_path}")
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_classpath_settings(conf=None):
    """Merge the [classpath] table of a loaded config over the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    overrides = (conf or {}).get("classpath", {})
    if not isinstance(overrides, dict):
        logger.warning("Ignoring [classpath] configuration: expected a table.")
        overrides = {}
    for key, value in overrides.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"Unknown configuration key 'classpath.{key}' ignored.")
            continue
        settings[key] = value

    # An empty marker would match every classpath entry
    for key in ("stdlib_group", "stdlib_artifact", "stdlib_marker"):
        if not isinstance(settings[key], str) or not settings[key].strip():
            logger.warning(f"Invalid value for 'classpath.{key}', using '{DEFAULT_SETTINGS[key]}' instead.")
            settings[key] = DEFAULT_SETTINGS[key]

    for key in ("output_dirs", "exclude_dirs"):
        # `config set` stores plain strings
        if isinstance(settings[key], str):
            settings[key] = [item.strip() for item in settings[key].split(",") if item.strip()]

    for key in ("maven_home", "gradle_home"):
        if settings[key]:
            settings[key] = os.path.abspath(os.path.expanduser(settings[key]))
    return settings
