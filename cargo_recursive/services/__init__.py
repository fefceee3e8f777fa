"""
Services for cargo-recursive.

- execution/: runs the command inside one directory
- traversal/: walks the tree and applies the error policy
- logging: diagnostic logger implementations
"""
