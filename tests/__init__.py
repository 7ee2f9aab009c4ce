"""
Only the root tests directory carries an __init__.py; test subdirectories are plain
folders (PEP 420) that mirror the package path, so test module basenames stay unique.
"""
