"""
Line-oriented configuration parser for looseconf.

This module provides the Parser class, which splits loosely formatted INI or
properties style text into lines, strips comments, tracks section headers and
resolves key/value pairs into a nested dictionary. Every syntactic element is
configurable at runtime, and configuration is progressive: each call to
``configure`` layers its options onto the ones already in place.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..models.matchers import CompiledMatchers
from ..models.options import ParseOptions


logger = logging.getLogger(__name__)

ParseResult = Dict[str, Any]
OptionsInput = Union[ParseOptions, Mapping[str, Any], None]


class ConfigurationError(Exception):
    """Raised when parse options are invalid or cannot be loaded."""
    pass


class Parser:
    """
    Configurable INI/properties style parser.

    A parser owns its options and the matchers compiled from them. Options are
    merged field by field on each ``configure`` call and every matcher is
    recompiled before the call returns, so a following ``parse`` always sees
    the latest configuration.

    Instances are not thread safe. Callers sharing a parser must serialize
    their ``configure`` and ``parse`` calls.
    """

    def __init__(self, options: OptionsInput = None, **overrides: Any):
        """
        Initialize the parser with default options.

        Args:
            options: Initial overrides (mapping or ParseOptions)
            **overrides: Initial overrides given as keyword arguments
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._result: ParseResult = {}
        self._section: ParseResult = self._result
        self.reset_configuration()
        self.configure(options, **overrides)

    @property
    def options(self) -> ParseOptions:
        """Current parse options."""
        return self._options

    @property
    def matchers(self) -> CompiledMatchers:
        """Matchers compiled from the current options."""
        return self._matchers

    def reset_configuration(self) -> None:
        """Restore the default options and recompile the matchers."""
        self._options = ParseOptions()
        self._matchers = CompiledMatchers.from_options(self._options)
        self.logger.debug("Parse options reset to defaults")

    def configure(self, options: OptionsInput = None, **overrides: Any) -> None:
        """
        Merge option overrides into the current options.

        Fields that are not given keep their current value. Unknown keys are
        ignored. The configuration is left untouched if any value is invalid.

        Args:
            options: Overrides as a mapping or a ParseOptions instance (only
                its explicitly set fields are applied)
            **overrides: Overrides given as keyword arguments

        Raises:
            ConfigurationError: If an option value is invalid
        """
        updates = self._collect_updates(options, overrides)
        if not updates:
            return

        merged = self._options.to_dict()
        merged.update(updates)

        try:
            new_options = ParseOptions(**merged)
            new_matchers = CompiledMatchers.from_options(new_options)
        except (ValidationError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid parse options: {e}") from e

        self._options = new_options
        self._matchers = new_matchers
        self.logger.debug(f"Parse options updated: {', '.join(sorted(updates))}")

    def _collect_updates(self, options: OptionsInput, overrides: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Gather known option overrides from the accepted input shapes.

        Args:
            options: Mapping, ParseOptions or None
            overrides: Keyword overrides, applied after ``options``

        Returns:
            Dictionary of option name to new value
        """
        if options is None:
            raw: Dict[str, Any] = {}
        elif isinstance(options, ParseOptions):
            raw = options.explicit_fields()
        elif isinstance(options, Mapping):
            raw = dict(options)
        else:
            raise ConfigurationError(
                f"Options must be a mapping or ParseOptions, got {type(options).__name__}"
            )
        raw.update(overrides)

        known = set(ParseOptions.option_names())
        unknown = sorted(str(key) for key in raw if key not in known)
        if unknown:
            self.logger.warning(f"Ignoring unknown parse options: {', '.join(unknown)}")

        return {key: value for key, value in raw.items() if key in known}

    def configure_from_file(self, config_path: Union[str, Path]) -> None:
        """
        Apply parse options read from a YAML file.

        Args:
            config_path: Path to the YAML options file

        Raises:
            ConfigurationError: If the file cannot be loaded or holds invalid options
        """
        self.configure(load_options(config_path))

    def parse(self, contents: Optional[str] = None) -> ParseResult:
        """
        Parse configuration text.

        Args:
            contents: Text to parse; None or an empty string yields an empty result

        Returns:
            Dictionary of keys to resolved values. Section headers open nested
            dictionaries; keys before the first header live at the top level.

        Raises:
            Exception: Whatever a custom resolve function raises
        """
        self._result = {}
        self._section = self._result
        if not contents:
            return self._result

        line_count = 0
        for line in self._split_lines(contents):
            self._parse_line(line)
            line_count += 1

        self.logger.debug(f"Parsed {line_count} lines into {len(self._result)} top-level entries")
        return self._result

    def parse_file(self, file_path: Union[str, Path], encoding: str = 'utf-8') -> ParseResult:
        """
        Read and parse a configuration file.

        Args:
            file_path: Path to the file
            encoding: Text encoding of the file

        Returns:
            See parse()

        Raises:
            ConfigurationError: If the file cannot be read
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding=encoding, newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        return self.parse(content)

    def _split_lines(self, contents: str) -> Iterator[str]:
        """Split text on the newline matcher, ignoring empty matches."""
        start = 0
        for match in self._matchers.newlines.finditer(contents):
            if match.end() == match.start():
                continue
            yield contents[start:match.start()]
            start = match.end()
        yield contents[start:]

    def _parse_line(self, text: str) -> None:
        """Classify a single line and apply its effect to the result."""
        matchers = self._matchers

        if self._options.trim:
            text = text.strip()

        if matchers.comment is not None:
            match = matchers.comment.search(text)
            if match:
                text = text[:match.start()]

        # Blank and comment-only lines keep the current section.
        if not text:
            return

        if matchers.section is not None:
            match = matchers.section.fullmatch(text)
            if match:
                self._open_section(match.group(1) if match.re.groups else '')
                return

        if matchers.delimiter is not None:
            match = matchers.delimiter.search(text)
            if match:
                key = text[:match.start()]
                self._section[key] = matchers.resolver(text[match.end():])
                return

        self.logger.debug(f"Ignoring unrecognized line: {text!r}")

    def _open_section(self, name: Optional[str]) -> None:
        """Make the named section current, creating it on first use."""
        name = name or ''
        section = self._result.get(name)
        if not isinstance(section, dict):
            section = self._result[name] = {}
        self._section = section


_default_parser = Parser()


def get_default_parser() -> Parser:
    """Return the shared parser used by the module level functions."""
    return _default_parser


def configure(options: OptionsInput = None, **overrides: Any) -> None:
    """
    Convenience function to configure the shared parser.

    Args:
        options: Overrides as a mapping or ParseOptions
        **overrides: Overrides given as keyword arguments

    Raises:
        ConfigurationError: If an option value is invalid
    """
    _default_parser.configure(options, **overrides)


def reset_configuration() -> None:
    """Convenience function to restore the shared parser's defaults."""
    _default_parser.reset_configuration()


def parse(contents: Optional[str] = None) -> ParseResult:
    """
    Convenience function to parse text with the shared parser.

    Args:
        contents: Text to parse

    Returns:
        See Parser.parse()
    """
    return _default_parser.parse(contents)


def load_options(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load parse options from a YAML file.

    String values of ``section`` and ``escape`` are regular expressions. String
    and list values of ``comment`` and ``newlines`` are literal markers.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dictionary of option overrides (empty for an empty file)

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not contain a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Options file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, IOError) as e:
        raise ConfigurationError(f"Cannot read options file {config_path}: {e}") from e

    if not content.strip():
        logger.warning(f"Options file is empty: {config_path}")
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Options file must contain a YAML object, got {type(data).__name__}")

    if 'resolve' in data and not isinstance(data['resolve'], bool):
        raise ConfigurationError("The resolve option in an options file must be true or false")

    logger.info(f"Loaded parse options from {config_path}")
    return data
