from __future__ import annotations


def pytest_configure(config) -> None:
    # The pytest11 entry point registers the plugin for installed copies;
    # source checkouts need it loaded by hand.
    if not config.pluginmanager.has_plugin("jsonshape"):
        config.pluginmanager.import_plugin("jsonshape.pytest_plugin")
