"""Example programs, one subpackage per example.

Every example package exports an ``EXAMPLE`` descriptor and contains a
``basic`` module (the problem) and a ``refactored`` module (the pattern).
Both modules expose ``run(context)`` and can be executed directly with
``python -m``.
"""
