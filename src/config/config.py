"""
Configuration Reader for Freelancer Player Stats

Profile-based JSON configuration for the player report tools:
- Profiles in profiles/<profile>.json, secrets in secrets/<profile>_secrets.json
- Built-in defaults for every setting the tools read
- Dot-notation access to nested values
- Path resolution relative to the configuration directory

Usage:
    from config import Config
    server_config = Config(profile='my_server')
    save_dir = server_config.get_path('paths.save_dir')

Settings are merged in this order (later overrides earlier):
1. Built-in defaults (Config.DEFAULTS)
2. The selected profile (profiles/<profile>.json)
3. Profile-specific secrets (secrets/<profile>_secrets.json)
"""

import copy
from typing import Dict, Any, List, Optional
from pathlib import Path

from fl_player_stats.base import JSONTool, logger


class Config(JSONTool):
    """
    JSON configuration reader for the Freelancer player report tools.

    Attributes:
        config_dir (str): Directory containing profile JSON files
        secrets_dir (str): Directory containing secrets JSON files
        profile (str): Currently active profile name
        data (dict): Merged configuration data
    """

    DEFAULT_CONFIG_DIR = str(Path(__file__).parent / 'profiles')
    DEFAULT_SECRETS_DIR = str(Path(__file__).parent / 'secrets')
    DEFAULT_PROFILE = "default"

    DEFAULTS = {
        "general": {
            "log_level": "INFO",
            "output_path": "output",
        },
        "paths": {
            "save_dir": None,
            "install_dir": None,
        },
        "report": {
            "range": None,
            "range_type": "LastSeen",
            "sort": "Name",
            "direction": "Asc",
            "export": "csv",
        },
    }

    def __init__(self, config_dir: str = None, secrets_dir: str = None, profile: str = None,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Config instance and load the profile.

        Args:
            config_dir (str, optional): Directory for config profiles.
            secrets_dir (str, optional): Directory for secrets files.
            profile (str, optional): Profile name to use. Defaults to 'default'.
            config (dict, optional): Base configuration dictionary for the tool base class.
        """
        super().__init__(config)

        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self.secrets_dir = secrets_dir or self.DEFAULT_SECRETS_DIR
        self.profile = profile or self.DEFAULT_PROFILE
        self.data = {}

        self._load()

    def run(self) -> Dict[str, Any]:
        """
        Return the merged configuration (implementation of the abstract tool method).
        """
        return self.data

    def _load(self):
        """
        Load the defaults, then merge the profile and its secrets over them.

        A missing default profile is created on disk from the defaults. A
        missing named profile, or one that fails to parse, leaves only the
        defaults in place.
        """
        self.data = copy.deepcopy(self.DEFAULTS)
        profile_path = Path(self.config_dir) / f"{self.profile}.json"

        if not profile_path.exists():
            if self.profile == self.DEFAULT_PROFILE:
                self._create_default_profile(profile_path)
            else:
                logger.warning(f"Profile '{self.profile}' not found. Using built-in defaults.")
            return

        try:
            profile_data = self.read_json(str(profile_path))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration from {profile_path}: {e}")
            return

        if isinstance(profile_data, dict):
            self._deep_merge(self.data, profile_data)
            logger.info(f"Loaded configuration from '{self.profile}'")
        else:
            logger.error(f"Profile '{self.profile}' must contain a JSON object")
            return

        self._load_secrets()

    def _create_default_profile(self, profile_path: Path):
        """
        Write the built-in defaults as the default profile.

        Args:
            profile_path (Path): Where the default profile is created
        """
        try:
            profile_path.parent.mkdir(parents=True, exist_ok=True)
            self.write_json(self.DEFAULTS, str(profile_path))
            logger.info(f"Created default profile at '{profile_path}'")
        except OSError as e:
            logger.error(f"Error creating default configuration: {e}")

    def _load_secrets(self):
        """
        Deep-merge secrets/<profile>_secrets.json over the loaded profile, if present.
        """
        secrets_path = Path(self.secrets_dir) / f"{self.profile}_secrets.json"
        if not secrets_path.exists():
            logger.debug(f"No secrets file found for profile '{self.profile}'")
            return

        try:
            secrets = self.read_json(str(secrets_path))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading profile-specific secrets: {e}")
            return

        if isinstance(secrets, dict):
            self._deep_merge(self.data, secrets)
            logger.info(f"Loaded and merged secrets from '{secrets_path}'")

    def _deep_merge(self, target: Dict[str, Any], source: Dict[str, Any]):
        """
        Recursively merge source into target; non-dict values in source replace target values.
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_merge(target[key], value)
            else:
                target[key] = value

    def get(self, path: str = None, default: Any = None) -> Any:
        """
        Get a configuration value by path using dot notation.

        Args:
            path (str, optional): Dot notation path such as "report.sort".
                If None, returns the entire configuration dictionary.
            default (Any, optional): Value to return if the path is not found
                or holds None.

        Examples:
            >>> Config().get('report.sort')
            'Name'
        """
        if path is None:
            return self.data

        current = self.data
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return default if current is None else current

    def list_profiles(self) -> List[str]:
        """
        List all available profile names (without the .json extension).
        """
        return sorted(f.stem for f in Path(self.config_dir).glob("*.json"))

    def get_path(self, path_key: str, fallback: str = None) -> str:
        """
        Get a resolved filesystem path from configuration.

        Relative paths are resolved against the configuration directory.
        Returns an empty string when the setting is empty.

        Examples:
            >>> Config(profile='my_server').get_path('paths.save_dir')
            '/srv/freelancer/Accts/MultiPlayer'
        """
        path = self.get(path_key, fallback)
        if not path:
            return ""

        path_obj = Path(path).expanduser()
        if path_obj.is_absolute():
            return str(path_obj)

        return str(Path(self.config_dir) / path_obj)
