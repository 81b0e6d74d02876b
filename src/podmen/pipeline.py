# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Ordered step registry used by account provisioning.

Each step module imports a shared :class:`Pipeline` and registers its
function with ``@pipeline.step(order=N)``; the package ``__init__``
imports the step modules so registration happens on import.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar, overload

_Ctx = TypeVar("_Ctx")

_StepFn = Callable[[_Ctx], None]

# Order given to steps registered without one.
_DEFAULT_ORDER = 500


class Pipeline(Generic[_Ctx]):
    """Runs registered steps against one context, lowest ``order`` first.

    Ties keep the order in which the steps were registered.  Steps are
    synchronous; the first exception propagates to the caller and the
    rest are skipped, with no undo of steps that already ran.

    Example::

        provision = Pipeline[ProvisionContext]("provision")

        @provision.step(order=100)
        def create_account(ctx: ProvisionContext) -> None: ...
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: list[tuple[int, int, _StepFn[_Ctx]]] = []
        self._seq = 0  # registration counter for stable sort

    @overload
    def step(self, fn: _StepFn[_Ctx]) -> _StepFn[_Ctx]: ...
    @overload
    def step(self, *, order: int) -> Callable[[_StepFn[_Ctx]], _StepFn[_Ctx]]: ...

    def step(
        self,
        fn: _StepFn[_Ctx] | None = None,
        *,
        order: int = _DEFAULT_ORDER,
    ) -> _StepFn[_Ctx] | Callable[[_StepFn[_Ctx]], _StepFn[_Ctx]]:
        """Add *fn* to the pipeline, bare or as ``step(order=N)``."""
        def _register(f: _StepFn[_Ctx]) -> _StepFn[_Ctx]:
            self._entries.append((order, self._seq, f))
            self._seq += 1
            return f

        if fn is not None:
            return _register(fn)
        return _register

    def steps(self) -> list[_StepFn[_Ctx]]:
        """Registered steps in execution order."""
        return [f for _ord, _seq, f in sorted(self._entries, key=lambda e: e[:2])]

    def run(self, ctx: _Ctx) -> None:
        """Execute every registered step in order."""
        for s in self.steps():
            s(ctx)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        ordered = sorted(self._entries, key=lambda e: e[:2])
        names = ", ".join(f"{f.__name__}({o})" for o, _s, f in ordered)
        return f"Pipeline({self.name!r}, [{names}])"
