import importlib.resources as pkg_resources
import tempfile
from pathlib import Path
from typing import Any, Literal, Protocol, cast

from dynaconf import Dynaconf, Validator
from dynaconf.validator import ValidatorList

# Internal data paths
DATA_FOLDER = Path(str(pkg_resources.files("lenny_corpus").joinpath("data")))
CONFIG_FILE = DATA_FOLDER / "config.toml"

# Remote archive (GitHub zips extract to <repo>-<branch>/episodes/<guest>/transcript.md)
ARCHIVE_URL = "https://github.com/ChatPRD/lennys-podcast-transcripts/archive/refs/heads/main.zip"
ARCHIVE_ROOT_NAME = "lennys-podcast-transcripts-main"
ARCHIVE_EPISODES_FOLDER = "episodes"
USER_AGENT = "lenny-corpus/1.0"

# Corpus layout
HOSTED_TRANSCRIPTS_PATH = Path("./transcripts")
TRANSCRIPT_FILENAME = "transcript.md"

# A corpus with more episode folders than this is considered already downloaded
EXISTING_EPISODE_THRESHOLD = 100
# The archive holds several hundred episodes; fewer than this after copying is a failure
MINIMUM_EPISODE_COUNT = 50

# Scratch paths shared by every bootstrap on the machine
TEMP_ARCHIVE_PATH = Path(tempfile.gettempdir()) / "lenny-transcripts.zip"
TEMP_EXTRACT_PATH = Path(tempfile.gettempdir()) / "lenny-extract"

Mode = Literal["local", "hosted"]
_MODES = ["local", "hosted"]

# Env values are parsed as TOML, so LENNY_TRANSCRIPTS_PATH=2024 would otherwise be an int
_CAST_VALIDATORS = [
    Validator("log_level", cast=lambda x: x.upper()),
    Validator("mode", cast=lambda x: x.lower()),
    Validator("transcripts_path", cast=str),
]


class ConfigProto(Protocol):
    """Protocol for config object."""

    # Built-ins
    validators: ValidatorList

    def load_file(  # noqa: D102
        self,
        path: str | Path | None = None,
        env: str | None = None,
        silent: bool = True,  # noqa: FBT001, FBT002
        key: str | None = None,
        validate: Any = None,
    ) -> None: ...

    # Config variables
    mode: Mode
    log_level: str

    # Local corpus
    transcripts_path: str


config = Dynaconf(
    envvar_prefix="LENNY",
    settings_files=[CONFIG_FILE],
    load_dotenv=True,
    ignore_unknown_envvars=True,
    validators=_CAST_VALIDATORS,
)

config = cast(ConfigProto, config)

config.validators.register(
    Validator("mode", is_in=_MODES, messages={"operations": "{name} must be one of " + ", ".join(_MODES)}),
    Validator("transcripts_path", required=True, ne="", messages={"operations": "{name} must not be blank"}),
)


def get_transcripts_path(config: ConfigProto) -> Path:
    """Get the folder that holds the episode folders for the configured mode."""
    if config.mode == "hosted":
        return HOSTED_TRANSCRIPTS_PATH

    return Path(str(config.transcripts_path)).expanduser()
