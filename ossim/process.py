"""Process table and a round-robin scheduler over simulated memory."""

from __future__ import annotations

import sys
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

from ossim.memory import MemoryManager, OutOfMemoryError
from ossim.states import ProcessState


class AllocationMode(Enum):
    CONTIGUOUS = "CONTIGUOUS"
    PAGED = "PAGED"


@dataclass
class PCB:
    """Process control block."""

    pid: int
    burst_time: int
    memory_required: int
    arrival_time: int
    mode: AllocationMode = AllocationMode.CONTIGUOUS
    state: ProcessState = ProcessState.NUEVO
    remaining_time: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_time = self.burst_time


class ProcessManager:
    """Creates processes, admits them into memory and schedules them."""

    def __init__(self, memory: MemoryManager, out: Optional[TextIO] = None, tick: float = 0.3) -> None:
        self.memory = memory
        self.tick = tick
        self._out = out
        self._processes: list[PCB] = []
        self._ready: deque[int] = deque()

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    @property
    def processes(self) -> tuple[PCB, ...]:
        return tuple(self._processes)

    @property
    def ready_queue(self) -> tuple[int, ...]:
        return tuple(self._ready)

    def _pcb(self, pid: int) -> Optional[PCB]:
        if 1 <= pid <= len(self._processes):
            return self._processes[pid - 1]
        return None

    def create_process(
        self,
        burst_time: int,
        memory_required: int,
        arrival_time: int,
        mode: AllocationMode = AllocationMode.CONTIGUOUS,
    ) -> int:
        """Register a new process and return its pid."""
        pid = len(self._processes) + 1
        self._processes.append(PCB(pid, burst_time, memory_required, arrival_time, mode))
        self._write(
            f"[Kernel] Proceso creado...\n PID = {pid} Tiempo de llegada = {arrival_time}"
            f" rafaga = {burst_time} mem = {memory_required}KB\n modo = {mode.value}\n"
        )
        return pid

    def admit_process(self, pid: int) -> bool:
        """Try to give a process memory and queue it; return whether it was admitted."""
        pcb = self._pcb(pid)
        if pcb is None:
            return False
        try:
            if pcb.mode is AllocationMode.CONTIGUOUS:
                self.memory.allocate_first_fit(pid, pcb.memory_required)
            else:
                self.memory.allocate_paged(pid, self.memory.pages_needed(pcb.memory_required))
        except OutOfMemoryError:
            self._write(f"[Planificador] PID={pid} rechazado (no hay memoria disponible)\n")
            return False
        self._set_state(pcb, ProcessState.LISTO)
        self._ready.append(pid)
        self._write(f"[Planificador] PID={pid} agregado a los listos\n")
        return True

    def admit_by_time(self, current_time: int) -> None:
        """Admit every new process that has arrived by ``current_time``."""
        for pcb in self._processes:
            if pcb.state is ProcessState.NUEVO and pcb.arrival_time <= current_time:
                self._write(f"[Tiempo {current_time}] PID = {pcb.pid} llego\n")
                self.admit_process(pcb.pid)

    def has_ready_processes(self) -> bool:
        return bool(self._ready)

    def _set_state(self, pcb: PCB, state: ProcessState) -> None:
        pcb.state = state
        if state is ProcessState.TERMINADO:
            if pcb.mode is AllocationMode.CONTIGUOUS:
                self.memory.free(pcb.pid)
            else:
                self.memory.free_paged(pcb.pid)
        self._write(f"[Estado] PID = {pcb.pid} -> {state}\n")

    def _sleep(self) -> None:
        if self.tick > 0:
            time.sleep(self.tick)

    def run_round_robin(self, quantum: int) -> int:
        """Run all processes to completion; return the final system time."""
        if quantum < 1:
            raise ValueError("quantum must be at least 1")
        self._write(f"\n[Planificador] Ejecutando Round Robin (quantum = {quantum})...\n")
        clock = 0
        while True:
            self._write(f"\n=== Tiempo {clock} ===\n")
            self.admit_by_time(clock)
            if self._ready:
                pid = self._ready.popleft()
                pcb = self._processes[pid - 1]
                self._set_state(pcb, ProcessState.EJECUCION)
                executed = 0
                while executed < quantum and pcb.remaining_time > 0:
                    self._write(
                        f"[Proceso {pid}] Ejecutando en tiempo {clock} "
                        f"(restantes = {pcb.remaining_time})\n"
                    )
                    self._sleep()
                    pcb.remaining_time -= 1
                    executed += 1
                    clock += 1
                    self._write(f"\n=== Tiempo {clock} ===\n")
                    self.admit_by_time(clock)
                if pcb.remaining_time <= 0:
                    self._set_state(pcb, ProcessState.TERMINADO)
                    self._write(f"[Planificador] PID = {pid} terminado\n")
                else:
                    self._set_state(pcb, ProcessState.LISTO)
                    self._ready.append(pid)
                    self._write(
                        f"[Planificador] PID = {pid} interrumpido, restantes={pcb.remaining_time}\n"
                    )
            else:
                self._write("[CPU] Inactivo (Esperando procesos en listos)\n")
                self._sleep()
                clock += 1
            if all(p.state is ProcessState.TERMINADO for p in self._processes):
                break
        self._write("\n[Planificador] Round-Robin completado.\n")
        return clock

    def render_process_table(self) -> str:
        lines = ["PID\tESTADO\t\tRAFAGA\tRESTANTES\tMEM"]
        lines.extend(
            f"{p.pid}\t{p.state}\t{p.burst_time}\t{p.remaining_time}\t\t{p.memory_required}KB"
            for p in self._processes
        )
        return "\n".join(lines)

    def print_process_table(self) -> None:
        self._write(self.render_process_table() + "\n")