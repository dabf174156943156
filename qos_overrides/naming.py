# Names and descriptions of QoS override parameters.
#
# Parameter files and introspection tools match on these names, so the
# format must not change. Topic names and ids are not escaped.

from .policies import qos_policy_kind_to_str

PARAMETER_NAMESPACE = 'qos_overrides'


def _policy_token(kind):
    token = qos_policy_kind_to_str(kind)
    if token is None:
        raise ValueError(f'no parameter name for qos policy kind: {kind!r}')
    return token


def parameter_prefix(topic_name, entity_type, entity_id=''):
    # qos_overrides.<topic>.<entity_type>[_<id>].
    prefix = f'{PARAMETER_NAMESPACE}.{topic_name}.{entity_type}'
    if entity_id:
        prefix += f'_{entity_id}'
    return prefix + '.'


def build_name(topic_name, entity_type, entity_id, kind):
    return parameter_prefix(topic_name, entity_type, entity_id) + _policy_token(kind)


def build_description(topic_name, entity_type, entity_id, kind):
    description = f'qos policy {{{_policy_token(kind)}}} for {entity_type} {{{topic_name}}}'
    if entity_id:
        description += f' with id {{{entity_id}}}'
    return description
