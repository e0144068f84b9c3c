# Part of Nodeproxy, see License file for full copyright and licensing details.

from __future__ import annotations

from decorator import decorator

__all__ = [
    'synchronized',
]


def synchronized(lock_attr: str = '_lock'):
    @decorator
    def locked(func, inst, *args, **kwargs):
        with getattr(inst, lock_attr):
            return func(inst, *args, **kwargs)
    return locked
locked = synchronized()
