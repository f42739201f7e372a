"""contrast_checker.core — Foundation layer.

Contains the value types, colour conversion, luminance maths, threshold
policy, and snapping configuration.
This module has NO dependencies on contrast_checker.snap or contrast_checker.batch.
Only stdlib is allowed here.
"""
