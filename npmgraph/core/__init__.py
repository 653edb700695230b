"""
Core services for npmgraph.

Configuration handling and the graph service used by the CLI layer.
"""
