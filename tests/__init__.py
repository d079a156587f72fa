"""FILTERBENCH test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every implementation of a port must share (clocks,
                  thread-safe generation).
- integration/  : The full benchmark scenario on real worker pools.
- functional/   : User-visible CLI flows (help, version, run, generate).
- e2e/          : The CLI with its logging stack (verbosity, flight recorder).
- fixtures/     : Shared pytest fixtures (no tests here).
- helpers/      : Shared assertion utilities (no tests here).

Markers are applied per folder by the root ``conftest.py``. Property-based
tests live with the layer they exercise and use ``@pytest.mark.property``.
"""
