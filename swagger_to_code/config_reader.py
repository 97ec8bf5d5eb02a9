"""
Configuration file and Swagger document loading.

A config file describes several APIs to generate in one language:

    {
        "language": "swift",
        "specs": {"PetStore": {"spec": "petstore.yaml", "className": "PetAPI", "basePath": "/v2"}},
        "output": "client",
        "opts": {"snake": false}
    }

Document paths and the output directory are relative to the config file.
Without a config file, a single API is given by its document path and name.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError
from .pipeline.backends import BACKENDS
from .pipeline.config import ApiConfig, CodeGeneratorConfig

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "client"
YAML_EXTENSIONS = (".yml", ".yaml")


@dataclass
class RunConfig:
    """Everything needed to run the generator once."""

    language: str
    apis: list[ApiConfig] = field(default_factory=list)
    output: Path = Path(DEFAULT_OUTPUT)
    config: CodeGeneratorConfig = field(default_factory=CodeGeneratorConfig)


def load_spec(path: str | Path) -> dict[str, Any]:
    """
    Load a Swagger document, as YAML for .yml/.yaml files and as JSON otherwise.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read Swagger file {path}: {exc}") from exc

    try:
        if path.suffix.lower() in YAML_EXTENSIONS:
            document = yaml.safe_load(content)
        else:
            document = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot parse Swagger file {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigError(f"Swagger file {path} does not contain an object")
    return document


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Cannot parse configuration file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {config_path} does not contain an object")
    return data


def read_config(
    config_path: str | Path | None = None,
    language: str | None = None,
    spec: str | Path | None = None,
    name: str | None = None,
    class_name: str | None = None,
    base_path: str | None = None,
    output: str | Path | None = None,
    opts: dict[str, Any] | None = None,
) -> RunConfig:
    """
    Combine a config file and command line arguments into a RunConfig.

    Command line values win over the config file: the language and output
    directory, and every option in ``opts`` that is not None.

    Raises:
        ConfigError: If the language is missing or unknown, or no API is given
    """
    file_config: dict[str, Any] = {}
    config_dir = None
    if config_path is not None:
        config_path = Path(config_path).resolve()
        config_dir = config_path.parent
        file_config = _read_config_file(config_path)
        logger.debug("Read configuration file %s", config_path)

    language_name = language or file_config.get("language")
    if language_name not in BACKENDS:
        acceptable = "\n".join(f'  "language": "{name}"' for name in BACKENDS)
        raise ConfigError(
            f"Missing or unknown language '{language_name}'. "
            f"Please add one of the following to the top level of your config file:\n{acceptable}"
        )

    specs = file_config.get("specs")
    if specs is None:
        if not spec or not name:
            raise ConfigError("Missing configuration file or spec/name arguments")
        specs = {name: {"spec": str(spec), "className": class_name or name, "basePath": base_path}}

    apis = []
    for api_name, spec_config in specs.items():
        if not isinstance(spec_config, dict) or not spec_config.get("spec"):
            raise ConfigError(f"Missing \"spec\" path for API '{api_name}' in configuration file {config_path}")
        spec_path = Path(spec_config["spec"])
        if config_dir is not None and "specs" in file_config:
            spec_path = config_dir / spec_path
        apis.append(
            ApiConfig(
                name=api_name,
                spec=load_spec(spec_path),
                class_name=spec_config.get("className"),
                base_path=spec_config.get("basePath"),
            )
        )

    if output is not None:
        output_dir = Path(output)
    elif config_dir is not None and file_config.get("output"):
        output_dir = config_dir / file_config["output"]
    else:
        output_dir = Path(DEFAULT_OUTPUT)

    options = dict(file_config.get("opts") or {})
    options.update({k: v for k, v in (opts or {}).items() if v is not None})

    return RunConfig(
        language=language_name,
        apis=apis,
        output=output_dir,
        config=CodeGeneratorConfig.from_dict(options),
    )
