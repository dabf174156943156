"""
Loading of parameter overrides from ROS-style YAML parameter files.

A parameter file maps node name patterns to their parameters:

    /**:
      ros__parameters:
        qos_overrides:
          /chatter:
            publisher:
              depth: 5

Nested mappings are flattened to dotted names, so the file above overrides
'qos_overrides./chatter.publisher.depth' on every node.
"""

import re

import yaml

from .exceptions import ParameterFileError, ParameterValueError
from .logging import loginfo
from .parameters import ParameterValue

PARAMETERS_KEY = 'ros__parameters'


def _absolute_node_name(node_name):
    if not node_name.startswith('/'):
        node_name = '/' + node_name
    return node_name


def _pattern_to_regex(pattern):
    # '/**' matches zero or more namespace tokens, '*' one non-empty
    # stretch within a single token
    pattern = _absolute_node_name(pattern)
    parts = []
    i = 0
    while i < len(pattern):
        if pattern.startswith('/**', i):
            parts.append('(?:/[^/]+)*')
            i += 3
        elif pattern[i] == '*':
            parts.append('[^/]+')
            while i < len(pattern) and pattern[i] == '*':
                i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile(''.join(parts) + r'\Z')


def node_name_matches(pattern, node_name):
    """
    Check whether a node name pattern from a parameter file selects a node.

    Args:
        pattern (str): Key of a parameter file section, e.g. '/**' or '/ns/talker'
        node_name (str): Fully qualified node name; a missing leading slash is added

    Returns:
        bool: True if the section applies to the node
    """
    return _pattern_to_regex(pattern).match(_absolute_node_name(node_name)) is not None


def _flatten_value(prefix, value, result):
    if isinstance(value, dict):
        for key, v in value.items():
            full_key = f'{prefix}.{key}' if prefix else str(key)
            _flatten_value(full_key, v, result)
    else:
        result[prefix] = value


def parse_parameter_overrides(data, node_name, source='<string>'):
    """
    Extract the overrides that apply to one node from parsed file contents.

    Sections are applied in file order, so a later section overrides the
    values of an earlier one.

    Args:
        data: Result of yaml.safe_load
        node_name (str): Fully qualified node name
        source (str): Name of the file, for error messages

    Returns:
        dict: Parameter name -> ParameterValue

    Raises:
        ParameterFileError: If the contents do not follow the parameter file layout
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParameterFileError(f'{source}: expected a mapping of node names at the top level')

    overrides = {}
    for pattern, section in data.items():
        if not isinstance(section, dict) or PARAMETERS_KEY not in section:
            raise ParameterFileError(
                f"{source}: section '{pattern}' must contain a '{PARAMETERS_KEY}' mapping"
            )
        if not node_name_matches(str(pattern), node_name):
            continue
        params = section[PARAMETERS_KEY]
        if params is None:
            continue
        if not isinstance(params, dict):
            raise ParameterFileError(f"{source}: '{PARAMETERS_KEY}' of '{pattern}' must be a mapping")

        flat = {}
        _flatten_value('', params, flat)
        for name, value in flat.items():
            try:
                overrides[name] = ParameterValue(value)
            except ParameterValueError as e:
                raise ParameterFileError(f"{source}: parameter '{name}': {e}") from e
    return overrides


def load_parameter_overrides(path, node_name):
    """
    Load the overrides that apply to one node from a YAML parameter file.

    Args:
        path (str): Path of the parameter file
        node_name (str): Fully qualified node name, e.g. '/ns/talker'

    Returns:
        dict: Parameter name -> ParameterValue

    Raises:
        ParameterFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ParameterFileError(f'cannot read parameter file {path}: {e}') from e
    except yaml.YAMLError as e:
        raise ParameterFileError(f'cannot parse parameter file {path}: {e}') from e

    overrides = parse_parameter_overrides(data, node_name, source=str(path))
    loginfo("Loaded %d parameter overrides for '%s' from %s", len(overrides), node_name, path)
    return overrides
