"""Environment file loading."""

import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from dotenv import dotenv_values
from dotenv.variables import parse_variables

from deployconf import config
from deployconf.errors import ConfigLoadWarning
from deployconf.models import EnvironmentContext

logger = logging.getLogger(__name__)

_context: Optional[EnvironmentContext] = None


def cascade_files(name: str) -> List[str]:
    """
    File names loaded for an environment, lowest priority first.

    ``.env.local`` is left out of the test environment so test runs give the
    same result on every machine.
    """
    files = [".env"]
    if name != "test":
        files.append(".env.local")
    files.extend([f".env.{name}", f".env.{name}.local"])
    return files


def expand_variables(values: Mapping[str, str], environ: Mapping[str, str]) -> Dict[str, str]:
    """
    Expand ${VAR} and ${VAR:-default} references across all loaded layers.

    References resolve against variables loaded earlier, with the shell
    variables in ``environ`` taking precedence. Unknown references expand to
    the empty string.
    """
    resolved: Dict[str, str] = {}
    for name, value in values.items():
        env = {**resolved, **environ}
        resolved[name] = "".join(atom.resolve(env) for atom in parse_variables(value))
    return resolved


def load_environment(
    name: Optional[str] = None,
    base_dir: Union[Path, str] = config.DEFAULT_ENVS_DIR,
    environ: Optional[Mapping[str, str]] = None,
) -> EnvironmentContext:
    """
    Load the environment files of a deployment stage.

    Later files override earlier ones for the same key. Variables already set
    in ``environ`` win over anything read from files.

    Args:
        name: Environment name (defaults to DEPLOY_ENV, then "test")
        base_dir: Directory holding the .env files
        environ: Variables supplied by the shell (defaults to os.environ)

    Returns:
        A read-only EnvironmentContext. A missing directory or missing
        environment file is recorded as a ConfigLoadWarning, not raised.
    """
    if environ is None:
        environ = os.environ
    if not name:
        name = environ.get(config.RUNTIME_ENV_VARIABLE) or config.DEFAULT_ENVIRONMENT

    logger.info("env: %s", name)

    base_path = Path(base_dir)
    merged: Dict[str, str] = {}
    loaded: List[Path] = []
    warnings: List[ConfigLoadWarning] = []

    if not base_path.is_dir():
        warnings.append(ConfigLoadWarning(
            f"Environment directory {base_path} not found, using process environment only"
        ))
    else:
        env_file = f".env.{name}"
        if not (base_path / env_file).is_file():
            warnings.append(ConfigLoadWarning(
                f"No {env_file} in {base_path}, using defaults for environment '{name}'"
            ))

        for filename in cascade_files(name):
            path = base_path / filename
            if not path.is_file():
                logger.debug("Skipping missing %s", path)
                continue
            values = dotenv_values(path, interpolate=False)
            for key, value in values.items():
                if value is None:
                    continue
                # Overridden keys move to the end so expansion follows load order
                merged.pop(key, None)
                merged[key] = value
            loaded.append(path)
            logger.debug("Loaded %d variables from %s", len(values), path)

    for warning in warnings:
        logger.warning("%s", warning)

    merged = expand_variables(merged, environ)
    merged.update(environ)

    return EnvironmentContext(
        name=name,
        variables=merged,
        loaded_files=tuple(loaded),
        warnings=tuple(warnings),
    )


def get_context(
    name: Optional[str] = None,
    base_dir: Union[Path, str] = config.DEFAULT_ENVS_DIR,
) -> EnvironmentContext:
    """
    Process-wide context, loaded on the first call only.

    Arguments given after the first call are ignored.
    """
    global _context
    if _context is None:
        _context = load_environment(name, base_dir)
    return _context


def reset_context() -> None:
    """Forget the process-wide context. Meant for tests."""
    global _context
    _context = None
