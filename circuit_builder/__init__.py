"""
Circuit builder analysis engine.

Packages (imported bare, with this directory on sys.path):
    models       - components, wire segments, circuit store
    analysis     - graph building, connectivity, topology, series/parallel solver
    controllers  - observer-based circuit editing and file I/O
"""
