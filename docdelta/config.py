import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Integer, Bool, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import ModifierFormatError
from .modifier_format import validate_key_path


class DocdeltaConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('docdelta_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, DocdeltaConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DocdeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class KeyPathList(List):
    """A list of dot separated keypaths."""

    def validate_elements(self, obj, value):
        value = super(KeyPathList, self).validate_elements(obj, value)
        for keypath in value:
            try:
                validate_key_path(keypath)
            except ModifierFormatError as e:
                raise TraitError('ignore config entries need to be keypaths: %s' % e)
        return value


class _Diffing(Global):

    ignore = KeyPathList(
        Unicode(),
        default_value=[],
        help="keypaths to leave out of the comparison, with everything below them.",
    ).tag(config=True)

    prune_empty_objects = Bool(
        False,
        help="remove mappings that the modifier leaves empty.",
    ).tag(config=True)


class Diff(_Diffing):

    forward = Bool(
        False,
        help="only capture values added or changed, never removals.",
    ).tag(config=True)


class Patch(Global):

    indent = Integer(
        2,
        help="indentation of the json output.",
    ).tag(config=True)


entrypoint_configurables = {
    'docdelta-diff': Diff,
    'docdelta-patch': Patch,
}
