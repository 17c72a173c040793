"""Word counting over a directory of text files in map, sort and reduce stages."""

__version__ = "0.1.0"

__all__ = ["filemgr", "sorter", "mapper", "reducer", "workflow", "cli"]