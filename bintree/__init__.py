"""Binary trees with parent links: nodes, traversals, properties, relatives and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "printing", "properties", "relatives"]