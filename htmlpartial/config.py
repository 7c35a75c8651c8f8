"""Resolution settings and config-file loading."""

import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from htmlpartial.exceptions import ConfigValidationError, ValidationError


TAG_NAME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_:-]*$')


@dataclass(frozen=True)
class PartialConfig:
    """Immutable settings threaded through every resolution call.

    Attributes:
        tag_name: Element name that marks a partial.
        base_path: Literal prefix prepended to every ``src`` value.
        variable_prefix: Marker that precedes variable names in partial content.
        encoding: Text encoding of partial files.
        pretty_print: Reflow the final document.
        indent: One nesting level of the pretty printer.
        detect_cycles: Report circular includes instead of recursing forever.
    """
    tag_name: str = 'partial'
    base_path: str = ''
    variable_prefix: str = '@@'
    encoding: str = 'utf-8'
    pretty_print: bool = True
    indent: str = '  '
    detect_cycles: bool = True

    def __post_init__(self):
        errors = validate_settings({f.name: getattr(self, f.name) for f in fields(self)})
        if errors:
            raise ConfigValidationError(errors)

    def merged(self, **overrides: Any) -> 'PartialConfig':
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


# Expected type per config key
SETTING_TYPES = {
    'tag_name': str,
    'base_path': str,
    'variable_prefix': str,
    'encoding': str,
    'pretty_print': bool,
    'indent': str,
    'detect_cycles': bool,
}


def validate_settings(settings: Dict[str, Any], source: str = "") -> List[ValidationError]:
    """Type and value checks shared by the dataclass and the file loader."""
    errors: List[ValidationError] = []

    for key, value in settings.items():
        expected = SETTING_TYPES.get(key)
        if expected is None:
            errors.append(ValidationError(f"Unknown config key '{key}'", path=source))
            continue
        if not isinstance(value, expected):
            errors.append(ValidationError(
                f"'{key}' must be a {expected.__name__}, got {type(value).__name__}",
                path=source
            ))

    tag_name = settings.get('tag_name')
    if isinstance(tag_name, str) and not TAG_NAME_PATTERN.match(tag_name):
        errors.append(ValidationError(f"Invalid tag name: '{tag_name}'", path=source))

    prefix = settings.get('variable_prefix')
    if isinstance(prefix, str) and not prefix:
        errors.append(ValidationError("'variable_prefix' must not be empty", path=source))

    return errors


class ConfigLoader:
    """Loads resolution settings from a YAML file with strict validation."""

    def __init__(self, workspace: Optional[Path] = None):
        """Initialize loader.

        Args:
            workspace: Directory that relative config paths are resolved against
        """
        self.workspace = Path(workspace or Path.cwd()).resolve()
        self.errors: List[ValidationError] = []

    def load(self, config_path: Path, defaults: Optional[PartialConfig] = None) -> PartialConfig:
        """Load a config file on top of ``defaults``.

        Args:
            config_path: YAML file to read
            defaults: Settings used for keys the file does not set

        Returns:
            The merged configuration

        Raises:
            ConfigValidationError: If the file is unreadable or invalid
        """
        self.errors = []
        config_path = (self.workspace / config_path).resolve()
        source = str(config_path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load config: {e}", source)
            self._raise_validation_errors()

        if data is None:
            data = {}
        if not isinstance(data, dict):
            self._add_error("Config must be a YAML mapping", source)
            self._raise_validation_errors()

        self.errors.extend(validate_settings(data, source))
        if self.errors:
            self._raise_validation_errors()

        if 'base_path' in data:
            data['base_path'] = self._resolve_base_path(data['base_path'], config_path.parent)

        return (defaults or PartialConfig()).merged(**data)

    def _resolve_base_path(self, base_path: str, config_dir: Path) -> str:
        """Anchor a relative base path at the config file's directory."""
        if not base_path:
            return base_path

        path = Path(base_path)
        if not path.is_absolute():
            path = config_dir / path

        resolved = str(path)
        if path.is_dir() or base_path.endswith(('/', os.sep)):
            resolved = resolved.rstrip('/' + os.sep) + os.sep
        return resolved

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message, path=path))

    def _raise_validation_errors(self):
        raise ConfigValidationError(self.errors)
