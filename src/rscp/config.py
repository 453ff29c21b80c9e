""" Location of local configuration. The only configuration currently
    consulted is the set of extra tag definition files, which extend the
    built-in tag catalogue when the process-wide registry is first built.
"""

import glob
import os


def directory(default=None):
    """ Return the configuration directory. In order of preference this is
        the *default* argument, which must be an absolute path and replaces
        any earlier choice; the ``RSCP_HOME`` environment variable; or
        ``$HOME/.rscp``. The answer is remembered after the first call, so
        later changes to the environment have no effect. Neither does a new
        *default* once the process-wide registry has been built, since the
        tag files are only read at that point.
    """

    if default is not None:
        default = os.path.expandvars(str(default))

        if not os.path.isabs(default):
            raise ValueError('configuration directory must be an absolute path: ' + default)

        directory.found = default

    if directory.found is None:
        directory.found = _locate()

    return directory.found

directory.found = None


def _locate():

    try:
        return os.environ['RSCP_HOME']
    except KeyError:
        pass

    try:
        home = os.environ['HOME']
    except KeyError:
        raise RuntimeError('neither RSCP_HOME nor HOME is set, cannot locate the rscp configuration directory') from None

    return os.path.join(home, '.rscp')



def tag_files():
    """ Return a sorted list of the tag definition files found in the
        ``tags`` subdirectory of the configuration :func:`directory`. The
        list is empty if there is no such subdirectory.
    """

    tag_directory = os.path.join(directory(), 'tags')

    if os.path.isdir(tag_directory):
        pass
    else:
        return list()

    pattern = os.path.join(tag_directory, '*.json')
    found = glob.glob(pattern)
    found.sort()
    return found


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
