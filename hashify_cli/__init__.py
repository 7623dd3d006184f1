# Path: hashify_cli/__init__.py
"""
hashify_cli - scriptable hashing from the command line

Computes cryptographic and non-cryptographic digests while user scripts
shape the value at every stage:

    [per algorithm: input >> input-finalizer >> compute >> output-finalizer >> output]
"""

__version__ = '1.0.0'
