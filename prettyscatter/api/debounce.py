from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional


class Debouncer:
    """
    Agenda uma corrotina após um atraso, cancelando a anterior se uma nova
    for agendada antes do prazo.

    Usado para eventos de redimensionamento: apenas o último evento de
    uma rajada dispara o recálculo do layout.

    Exceções levantadas pela corrotina agendada são entregues a
    `on_error`; sem esse callback, são apenas impressas.
    """

    def __init__(
        self,
        delay: float,
        on_error: Optional[Callable[[BaseException], None]] = None,
    ) -> None:
        if delay < 0.0:
            raise ValueError("delay não pode ser negativo.")
        self.delay = delay
        self.on_error = on_error
        self._pending: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def schedule(self, action: Callable[[], Awaitable[None]]) -> asyncio.Task:
        """
        Agenda `action` para execução após `delay` segundos.

        Deve ser chamado de dentro de um loop de eventos em execução.
        """
        self.cancel()

        async def _run() -> None:
            await asyncio.sleep(self.delay)
            await action()

        self._pending = asyncio.get_running_loop().create_task(_run())
        self._pending.add_done_callback(self._report)
        return self._pending

    def _report(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is None:
            return
        if self.on_error is not None:
            self.on_error(exc)
        else:
            print(f"Falha na ação agendada: {exc!r}")

    def cancel(self) -> None:
        if self.pending:
            self._pending.cancel()
        self._pending = None


__all__ = ["Debouncer"]
