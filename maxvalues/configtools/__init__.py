"""
General configuration handling tooling.
"""
import pathlib
from collections.abc import Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from maxvalues.errors import ConfigurationError
from maxvalues.utils import PathLike


def load_yaml(path: PathLike) -> Mapping:
    """Load content of the YAML file from the indicated location."""
    if not isinstance(path, pathlib.Path):
        path = pathlib.Path(path)

    yaml = YAML()
    with path.open(mode='r') as handle:
        try:
            content = yaml.load(handle)
        except YAMLError as exc:
            raise ConfigurationError(f'malformed YAML in \'{path}\': {exc}') from exc

    return content


def write_yaml(content: Mapping, path: PathLike,
               force_write: bool = False) -> pathlib.Path:
    """Write mapping-type data as YAML to the file system."""
    path = pathlib.Path(path)
    if path.exists() and not force_write:
        raise FileExistsError(f'Cannot write to location \'{path}\'. Select new path or '
                              f'force write via flag argument.')
    yaml = YAML()
    with path.open(mode='w') as handle:
        yaml.dump(dict(content), stream=handle)
    return path


def backup_configuration(configuration: Mapping, target: PathLike,
                         force_write: bool = False) -> pathlib.Path:
    """
    Save the effective configuration of a run. A directory target receives
    a 'configuration.yaml' file.
    """
    target = pathlib.Path(target)
    if target.is_dir():
        target = target / 'configuration.yaml'
    return write_yaml(configuration, target, force_write=force_write)
