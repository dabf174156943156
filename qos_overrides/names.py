# Topic name expansion for override parameter names.


def _normalize_name(name):
    # Collapse double slashes and drop a trailing slash (keeping bare / and ~/)
    while '//' in name:
        name = name.replace('//', '/')
    if len(name) > 1 and name.endswith('/') and name != '~/':
        name = name.rstrip('/')
    if name == '~':
        name = '~/'
    return name


def expand_topic_name(name, namespace='/', node_name=None):
    # Expand a topic name to its fully qualified form.
    #   /chatter  -> /chatter
    #   chatter   -> <namespace>/chatter
    #   ~/chatter -> <namespace>/<node_name>/chatter
    if not name:
        raise ValueError('topic name must not be empty')
    name = _normalize_name(name)
    ns = (namespace or '/').rstrip('/')
    if ns and not ns.startswith('/'):
        ns = '/' + ns

    if name.startswith('/'):
        return name

    if name.startswith('~/'):
        if not node_name:
            raise ValueError(f"cannot expand private topic name '{name}' without a node name")
        suffix = name[2:]
        node_base = f'{ns}/{node_name}'
        return node_base if not suffix else f'{node_base}/{suffix}'

    return f'{ns}/{name}'
