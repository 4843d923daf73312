"""Application package initializer.

Ensures the local ``helloworld`` package is resolved as a regular package
instead of a namespace package assembled from unrelated distributions.
"""
