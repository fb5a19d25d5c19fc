"""Package synchronization — install, remove and prune, in that order.

- Phase 1 (installer): copy managed packages out of node_modules
- Phase 2 (remover): delete installed packages that are no longer declared
- Phase 3 (pruner): delete scope directories left empty by phase 2
- guard: refuses to touch anything outside Assets/Plugins/Packages
"""
