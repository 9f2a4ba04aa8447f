"""
Search configuration.

A HuntConfig is an immutable value threaded through every normalize,
index and query call. Applications usually build one at startup with
configure(), which installs it as the process default; any call can
override that default with an explicit config= argument.

Options:
- additional_words_to_ignore: words appended to the base stopword list
- transliteration_option: None | "cyrillic" | "german"
- searches_index_name: opaque index spec, returned unmodified to the host
- index_name: key under "searches" holding the term set (default "default")
- stemmer: "snowball" (default) | "porter"

Environment (HuntConfig.from_env):
    HUNT_ADDITIONAL_WORDS_TO_IGNORE  comma separated list
    HUNT_TRANSLITERATION_OPTION      cyrillic | german
    HUNT_INDEX_NAME                  default
    HUNT_STEMMER                     snowball | porter
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, FrozenSet, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError
from .text.stemmer import STEMMERS
from .text.stopwords import BASE_STOPWORDS
from .text.transliteration import TRANSLITERATION_TABLES

logger = logging.getLogger(__name__)

SEARCHES_KEY = "searches"


def check_index_name(value: Any) -> str:
    """Index names are single keys under 'searches': non-empty, no dots"""
    if not isinstance(value, str) or not value or "." in value:
        raise ConfigurationError(f"index_name must be a non-empty key without dots, got {value!r}")
    return value


class HuntConfig(BaseModel):
    """Immutable search configuration"""

    model_config = ConfigDict(frozen=True)

    additional_words_to_ignore: Tuple[str, ...] = ()
    transliteration_option: Optional[str] = None
    searches_index_name: Any = None
    index_name: str = "default"
    stemmer: str = "snowball"

    def __init__(self, **data: Any):
        # Surface every validation failure as a ConfigurationError
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hunt configuration: {e}") from e

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "HuntConfig":
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hunt configuration: {e}") from e

    @classmethod
    def model_validate_json(cls, json_data: Any, *args: Any, **kwargs: Any) -> "HuntConfig":
        try:
            return super().model_validate_json(json_data, *args, **kwargs)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hunt configuration: {e}") from e

    @field_validator("additional_words_to_ignore", mode="before")
    @classmethod
    def _check_words(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            raise ValueError("additional_words_to_ignore must be a sequence of strings, not a string")
        words = tuple(value)
        for word in words:
            if not isinstance(word, str):
                raise ValueError(f"additional_words_to_ignore entries must be strings, got {word!r}")
        return words

    @field_validator("transliteration_option", mode="before")
    @classmethod
    def _check_transliteration(cls, value):
        if value is None or value == "" or value == "none":
            return None
        option = str(value).lower()
        if option not in TRANSLITERATION_TABLES:
            raise ValueError(
                f"Unknown transliteration option: {value}. "
                f"Valid options: {', '.join(sorted(TRANSLITERATION_TABLES))}"
            )
        return option

    @field_validator("index_name")
    @classmethod
    def _check_index_name(cls, value):
        return check_index_name(value)

    @field_validator("stemmer", mode="before")
    @classmethod
    def _check_stemmer(cls, value):
        name = str(value).lower()
        if name not in STEMMERS:
            raise ValueError(
                f"Unknown stemmer: {value}. Valid options: {', '.join(sorted(STEMMERS))}"
            )
        return name

    @property
    def stopwords(self) -> FrozenSet[str]:
        """Base stopwords plus additional_words_to_ignore"""
        return BASE_STOPWORDS.union(self.additional_words_to_ignore)

    @property
    def searches_field(self) -> str:
        """Dotted path of the indexed field, e.g. 'searches.default'"""
        return f"{SEARCHES_KEY}.{self.index_name}"

    def replace(self, **changes: Any) -> "HuntConfig":
        """Return a validated copy with some options changed"""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return HuntConfig(**values)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "HuntConfig":
        """
        Build configuration from HUNT_* environment variables.

        Loads .env.local (or the given env_file) first, .env as fallback.
        """
        if env_file is not None:
            load_dotenv(env_file, override=True)
        else:
            env_local = Path.cwd() / ".env.local"
            env_default = Path.cwd() / ".env"
            if env_local.exists():
                load_dotenv(env_local, override=True)
            elif env_default.exists():
                load_dotenv(env_default, override=True)

        options = {}

        words = os.getenv("HUNT_ADDITIONAL_WORDS_TO_IGNORE")
        if words:
            options["additional_words_to_ignore"] = [w.strip() for w in words.split(",") if w.strip()]

        transliteration = os.getenv("HUNT_TRANSLITERATION_OPTION")
        if transliteration:
            options["transliteration_option"] = transliteration

        index_name = os.getenv("HUNT_INDEX_NAME")
        if index_name:
            options["index_name"] = index_name

        stemmer = os.getenv("HUNT_STEMMER")
        if stemmer:
            options["stemmer"] = stemmer

        return cls(**options)


_config = HuntConfig()


def get_config() -> HuntConfig:
    """Current process-wide default configuration"""
    return _config


def resolve_config(config: Optional[HuntConfig] = None) -> HuntConfig:
    """Explicit config wins, otherwise the process default"""
    return config if config is not None else _config


def configure(fn: Optional[Callable[[HuntConfig], HuntConfig]] = None, **options: Any) -> HuntConfig:
    """
    Install a new process-wide configuration.

    Every call starts from defaults: options not passed are reset. With fn,
    the fresh config (defaults plus options) is passed to fn and the config
    it returns is installed.

    Examples:
        >>> configure(additional_words_to_ignore=["bang"])
        >>> configure(transliteration_option="cyrillic")
        >>> configure(lambda config: config.replace(stemmer="porter"))
        >>> configure()  # back to defaults
    """
    global _config
    try:
        new_config = HuntConfig(**options)
        if fn is not None:
            new_config = fn(new_config)
            if not isinstance(new_config, HuntConfig):
                raise ConfigurationError(
                    f"configure callback must return a HuntConfig, got {type(new_config).__name__}"
                )
    except ConfigurationError as e:
        logger.error(f"Rejected hunt configuration {options}: {e}")
        raise
    _config = new_config
    logger.info(
        f"Hunt configured: index={new_config.searches_field}, "
        f"transliteration={new_config.transliteration_option}, "
        f"stemmer={new_config.stemmer}, "
        f"extra_stopwords={len(new_config.additional_words_to_ignore)}"
    )
    return new_config


def reset_config() -> HuntConfig:
    """Restore the default configuration"""
    global _config
    _config = HuntConfig()
    return _config


def searches_index_name() -> Any:
    """Index spec configured for the host's index creation, unmodified"""
    return _config.searches_index_name
