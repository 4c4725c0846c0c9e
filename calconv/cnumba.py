#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 19:15:08 2025

Compilation of the calendar arithmetic with numba.

The kernels are plain scalar functions (ints and floats in, ints, floats and
tuples out) so they compile in nopython mode. Compilation is lazy: the first
call with a new argument type triggers it. Set NUMBA_DISABLE_JIT=1 to run
the pure Python versions, e.g. for debugging or coverage.
"""

import os
import numba

numba_acc = os.environ.get("NUMBA_DISABLE_JIT", "0") in ("", "0")


def cnjit(signature_or_function=None, cache=False, **options):
    """
    Decorator compiling a function with numba.njit.

    Can be used bare (@cnjit) or with arguments
    (@cnjit(cache=True), @cnjit('f8(i8, i8, i8)')).

    Parameters
    ----------
    signature_or_function : str, callable or None
        Function to compile, or an explicit numba signature.
    cache : bool
        Cache the compiled code on disk.

    Returns
    -------
    The compiled dispatcher, or a decorator producing one.
    """
    if callable(signature_or_function):
        return numba.njit(signature_or_function, cache=cache, **options)

    def decorator(func):
        if signature_or_function is None:
            return numba.njit(cache=cache, **options)(func)
        return numba.njit(signature_or_function, cache=cache,
                          **options)(func)
    return decorator
