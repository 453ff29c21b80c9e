import pytest
import rscp


@pytest.fixture
def registry():
    """ A frozen registry holding only the built-in tag catalogue, so that
        nothing in the invoking user's configuration directory leaks into
        the results.
    """

    return rscp.protocol.registry.builtin().freeze()


@pytest.fixture
def decoder(registry):
    return rscp.Decoder(registry)


@pytest.fixture
def rscp_home(tmp_path, monkeypatch):
    """ Point the configuration directory at an empty temporary location,
        and reset the cached process-wide registry around the test.
    """

    monkeypatch.setenv('RSCP_HOME', str(tmp_path))
    monkeypatch.setattr(rscp.config.directory, 'found', None)
    monkeypatch.setattr(rscp.protocol.registry, '_registry', None)

    yield tmp_path


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
