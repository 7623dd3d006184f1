# Path: hashify_cli/process/config_builder/json_config.py
"""
JSON Configuration Builder

Reads a config document and produces one ConfigEntry per resolved
FunctionVariable.

Document format:
    {
        "CRC:Fast": { "profile": "CRC32C" },
        "FNV1a":    { "config": { "HashSizeInBits": 64,
                                  "Prime": "1099511628211",
                                  "Offset": "0xCBF29CE484222325" } }
    }

Failure policy:
- An unreadable file, invalid JSON or a non-object root is fatal
- Problems with a single key are logged and that key is skipped
- A config body is applied all-or-nothing: one bad field discards the key
- The first entry registered for a FunctionVariable wins, including keys
  repeated verbatim in the document
- A config body whose properties all miss falls back to the default config
"""

import json
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional

from pydantic import ValidationError

from hashify_cli.constants import CONFIG_BODY_CONFIG, CONFIG_BODY_PROFILE
from hashify_cli.core.errors import ArgumentError, CoercionError, UnknownReferenceError
from hashify_cli.core.logger import get_input_logger
from hashify_cli.process.config_builder.coercion import coerce_value, describe_json
from hashify_cli.process.resolver import FunctionVariable, resolve_query
from hashify_cli.registry import AlgorithmDescriptor, AlgorithmRegistry, HashConfig


logger = get_input_logger('config_builder')


# =============================================================================
# ENTRIES
# =============================================================================

class ConfigProvenance(str, Enum):
    """Where a registered configuration came from."""
    PROFILE = 'profile'
    OVERRIDE = 'override'


@dataclass(frozen=True)
class ConfigEntry:
    """
    Configuration registered for one FunctionVariable.

    Attributes:
        variable: Owning FunctionVariable
        config: Configuration object
        provenance: Profile-derived or override-derived
        profile_name: Profile used, for profile-derived entries
    """
    variable: FunctionVariable
    config: HashConfig
    provenance: ConfigProvenance
    profile_name: Optional[str] = None


class ConfigCatalog:
    """Registered ConfigEntries keyed by FunctionVariable; first insert wins."""

    def __init__(self):
        self._entries: dict[FunctionVariable, ConfigEntry] = {}

    def register(self, entry: ConfigEntry) -> bool:
        """
        Register an entry.

        Returns:
            False when an entry for the same FunctionVariable already exists
        """
        if entry.variable in self._entries:
            logger.warning(
                f"Configuration for '{entry.variable}' is already registered; "
                f"ignoring the later entry"
            )
            return False
        self._entries[entry.variable] = entry
        return True

    def get(self, variable: FunctionVariable) -> Optional[ConfigEntry]:
        return self._entries.get(variable)

    def algorithm_wide(self, descriptor: AlgorithmDescriptor) -> Optional[ConfigEntry]:
        """Entry registered for the algorithm without an instance name."""
        return self._entries.get(FunctionVariable(descriptor))

    def __contains__(self, variable: object) -> bool:
        return variable in self._entries

    def __iter__(self) -> Iterator[ConfigEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


# =============================================================================
# DECODING
# =============================================================================

class DocumentObject(dict):
    """
    Decoded JSON object that remembers every property in document order.

    A plain dict keeps only the last of two equal keys; pairs keeps both.
    """

    def __init__(self, pairs: list[tuple[str, Any]]):
        super().__init__(pairs)
        self.pairs = pairs


def _properties(value: dict) -> list[tuple[str, Any]]:
    if isinstance(value, DocumentObject):
        return value.pairs
    return list(value.items())


def decode_document(text: str) -> Any:
    """
    Decode a config document.

    Objects become DocumentObjects and every number becomes a Decimal, so
    coercion sees literals exactly as written.

    Raises:
        ValueError: On invalid JSON
    """
    return json.loads(
        text,
        parse_float=Decimal,
        parse_int=Decimal,
        object_pairs_hook=DocumentObject,
    )


# =============================================================================
# BUILDER
# =============================================================================

class ConfigDocumentBuilder:
    """
    Builds a ConfigCatalog from a JSON config document.

    Example:
        builder = ConfigDocumentBuilder(registry)
        catalog = builder.load(Path('hash_config.json'))
    """

    def __init__(self, registry: AlgorithmRegistry):
        self.registry = registry

    def load(self, path: Path) -> ConfigCatalog:
        """
        Read and build a config document.

        Raises:
            ArgumentError: If the file is unreadable or not a JSON object
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ArgumentError(f"Could not read config file '{path}': {e}") from e

        try:
            document = decode_document(text)
        except ValueError as e:
            raise ArgumentError(f"Config file '{path}' is not valid JSON: {e}") from e

        logger.info(f"Loading configuration from {path}")
        return self.build(document)

    def build(self, document: Any) -> ConfigCatalog:
        """
        Build a catalog from a decoded document.

        Args:
            document: Decoded JSON (numbers as int or Decimal)

        Raises:
            ArgumentError: If the root is not an object
        """
        if not isinstance(document, dict):
            raise ArgumentError(
                f"Config document root must be an object, got {describe_json(document)}"
            )

        catalog = ConfigCatalog()
        for key, body in _properties(document):
            try:
                entry = self._build_entry(key, body)
            except CoercionError as e:
                logger.error(f"Discarding configuration '{key}': {e}")
                continue
            except (ArgumentError, UnknownReferenceError) as e:
                logger.warning(f"Skipping configuration '{key}': {e}")
                continue

            if entry is not None:
                catalog.register(entry)

        logger.debug(f"Registered {len(catalog)} configuration entries")
        return catalog

    def _build_entry(self, key: str, body: Any) -> Optional[ConfigEntry]:
        if not isinstance(body, dict):
            raise ArgumentError(f"Body must be an object, got {describe_json(body)}")
        if not key.strip():
            raise ArgumentError("Key must be a non-empty algorithm query")

        variables = resolve_query(key, self.registry)
        if not variables:
            raise UnknownReferenceError(f"No hash algorithm matches '{key}'")
        if len(variables) > 1:
            logger.warning(f"Key '{key}' resolves to several algorithms; using '{variables[0]}'")
        variable = variables[0]

        recognized = {}
        for name, value in _properties(body):
            lowered = name.casefold()
            if lowered in (CONFIG_BODY_PROFILE, CONFIG_BODY_CONFIG):
                if lowered in recognized:
                    raise ArgumentError(f"Property '{lowered}' is given more than once")
                recognized[lowered] = value
            else:
                logger.warning(f"Ignoring unknown property '{name}' in '{key}'")

        if len(recognized) != 1:
            raise ArgumentError(
                f"Body must contain exactly one of '{CONFIG_BODY_PROFILE}' "
                f"or '{CONFIG_BODY_CONFIG}'"
            )

        if CONFIG_BODY_PROFILE in recognized:
            return self._profile_entry(variable, recognized[CONFIG_BODY_PROFILE])
        return self._override_entry(variable, recognized[CONFIG_BODY_CONFIG])

    def _profile_entry(self, variable: FunctionVariable, value: Any) -> ConfigEntry:
        if not isinstance(value, str) or not value.strip():
            raise ArgumentError(f"'{CONFIG_BODY_PROFILE}' must be a non-empty string")

        profile = self.registry.find_profile(variable.descriptor, value)
        if profile is None:
            raise UnknownReferenceError(
                f"Algorithm '{variable.descriptor}' has no profile named '{value}'"
            )

        logger.debug(f"'{variable}' uses profile '{profile.name}'")
        return ConfigEntry(variable, profile.create(), ConfigProvenance.PROFILE, profile.name)

    def _override_entry(self, variable: FunctionVariable, value: Any) -> Optional[ConfigEntry]:
        if not isinstance(value, dict):
            raise ArgumentError(
                f"'{CONFIG_BODY_CONFIG}' must be an object, got {describe_json(value)}"
            )

        config = self.registry.default_config(variable.descriptor)
        updates = {}
        for name, raw in _properties(value):
            config_field = config.find_field(name)
            if config_field is None:
                logger.warning(f"'{variable.descriptor}' has no configurable field '{name}'")
                continue
            if not config_field.writable:
                logger.warning(f"Field '{name}' of '{variable.descriptor}' is read-only")
                continue
            if config_field.name in updates:
                logger.warning(
                    f"Field '{name}' of '{variable.descriptor}' is set more than once; "
                    f"keeping the first value"
                )
                continue
            updates[config_field.name] = coerce_value(raw, config_field.field_type, name)

        if not updates:
            if not value:
                logger.warning(f"Configuration for '{variable}' sets no fields; skipping")
                return None
            logger.warning(
                f"Configuration for '{variable}' matches no writable field; "
                f"using the default configuration"
            )
            return ConfigEntry(variable, config, ConfigProvenance.OVERRIDE)

        return ConfigEntry(variable, _apply(config, updates), ConfigProvenance.OVERRIDE)


def _apply(config: HashConfig, updates: dict[str, Any]) -> HashConfig:
    """Validate a config copy with updates applied, all at once."""
    data = config.model_dump()
    data.update(updates)
    try:
        return type(config).model_validate(data)
    except ValidationError as e:
        messages = '; '.join(error['msg'] for error in e.errors())
        raise CoercionError(f"Invalid configuration: {messages}") from e
