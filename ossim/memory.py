"""Simulated main memory with contiguous first-fit and paged allocation."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Optional, TextIO


class OutOfMemoryError(Exception):
    """Raised when a process cannot be given the memory it asks for."""

    def __init__(self, pid: int, needed: int, message: str) -> None:
        super().__init__(message)
        self.pid = pid
        self.needed = needed


def _cell(owner: Optional[int]) -> str:
    return "[ ]" if owner is None else f"[{owner}]"


class MemoryManager:
    """Block-addressed memory that supports both allocation schemes."""

    def __init__(self, total_size: int, frame_size: int = 4, out: Optional[TextIO] = None) -> None:
        if total_size < 0:
            raise ValueError("total_size must not be negative")
        if frame_size <= 0:
            raise ValueError("frame_size must be positive")
        self._out = out
        self.total_size = total_size
        self.frame_size = frame_size
        self.total_frames = total_size // frame_size
        self._memory: list[Optional[int]] = [None] * total_size
        self._frames: list[Optional[int]] = [None] * self.total_frames
        self._page_tables: dict[int, list[int]] = {}
        self._write(
            f"[Memoria] Inicializada con {total_size} Bloques de memoria "
            f"{self.total_frames} Frames de tamaño {frame_size} bloques.\n"
        )

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    @property
    def memory(self) -> tuple[Optional[int], ...]:
        """Owner of each block, None where the block is free."""
        return tuple(self._memory)

    @property
    def frame_table(self) -> tuple[Optional[int], ...]:
        """Owner of each frame, None where the frame is free."""
        return tuple(self._frames)

    @property
    def page_tables(self) -> dict[int, tuple[int, ...]]:
        """Frames held by each process using paged memory."""
        return {pid: tuple(frames) for pid, frames in self._page_tables.items()}

    # Contiguous allocation

    def find_and_allocate_first_fit(self, pid: int, size: int, post_compaction: bool = False) -> Optional[int]:
        """Claim the first free run of ``size`` blocks; return its start or None."""
        run = 0
        start = 0
        for index, owner in enumerate(self._memory):
            if owner is not None:
                run = 0
                continue
            if run == 0:
                start = index
            run += 1
            if run == size:
                self._memory[start:start + size] = [pid] * size
                note = "(despues de compactar) " if post_compaction else ""
                self._write(
                    f"[Memoria] Asignar {note}{size} bloques al PID={pid} "
                    f"en el rango: [{start}, {start + size - 1}]\n"
                )
                return start
        return None

    def allocate_first_fit(self, pid: int, size: int) -> int:
        """Allocate with first fit, compacting once if needed; return the start block."""
        start = self.find_and_allocate_first_fit(pid, size, False)
        if start is not None:
            return start
        self._write("[Memoria] First-Fit fallo. Intentando compactacion...\n")
        self.compact()
        start = self.find_and_allocate_first_fit(pid, size, True)
        if start is not None:
            return start
        message = f"[Memoria] ERROR: No hay suficiente memoria para PID = {pid} ({size} bloques necesarios)"
        self._write(message + "\n")
        raise OutOfMemoryError(pid, size, message)

    def free(self, pid: int) -> None:
        """Release every block owned by ``pid``."""
        self._write(f"\n[Memoria] Preparando para liberar memoria del PID={pid}\n")
        self.print_memory()
        self._memory = [None if owner == pid else owner for owner in self._memory]
        self._write(f"[Memoria] Se ha liberado la memoria ocupada por el PID={pid}\n")

    def compact(self) -> None:
        """Slide every used block to the start of memory, keeping their order."""
        self._write("\n[Memoria] INICIANDO COMPACTACION...\n")
        self._write(">>> Memoria ANTES de compactar (Fragmentada) <<<\n")
        self.print_memory()
        used = [owner for owner in self._memory if owner is not None]
        self._memory = used + [None] * (self.total_size - len(used))
        self._write("\n[Memoria] COMPACTACION FINZALIZADA...\n")
        self._write(">>> Memoria DESPUES de compactar (Contigua) <<<\n")
        self.print_memory()

    def render_memory(self) -> str:
        """Map of the blocks, one cell per block."""
        return "=== Mapa de Memoria ===\n" + "".join(map(_cell, self._memory))

    def print_memory(self) -> None:
        self._write("\n" + self.render_memory() + "\n")

    # Paged allocation

    def pages_needed(self, size: int) -> int:
        """Number of frames needed to hold ``size`` blocks."""
        return -(-size // self.frame_size)

    def allocate_paged(self, pid: int, pages_needed: int) -> list[int]:
        """Give ``pid`` the first free frames; return their numbers."""
        free_frames = (index for index, owner in enumerate(self._frames) if owner is None)
        assigned = list(islice(free_frames, max(pages_needed, 0)))
        if len(assigned) < pages_needed:
            message = (
                f"[Paginacion] ERROR: No hay frames libres suficientes para PID = {pid} "
                f"(necesita {pages_needed})"
            )
            self._write(message + "\n")
            raise OutOfMemoryError(pid, pages_needed, message)
        for frame in assigned:
            self._frames[frame] = pid
        self._page_tables[pid] = assigned
        listing = "".join(f" {frame}" for frame in assigned)
        self._write(f"[Paginacion] PID = {pid} asignado {pages_needed} paginas (frames:{listing} )\n")
        return list(assigned)

    def free_paged(self, pid: int) -> None:
        """Release the frames of ``pid``; unknown pids are ignored."""
        frames = self._page_tables.pop(pid, None)
        if frames is None:
            return
        for frame in frames:
            if 0 <= frame < self.total_frames:
                self._frames[frame] = None
        self._write(f"[Paginacion] Liberadas paginas de PID={pid}\n")

    def render_page_tables(self) -> str:
        lines = ["=== Page Tables ==="]
        lines.extend(
            f"PID {pid}:" + "".join(f" [F{frame}]" for frame in frames)
            for pid, frames in self._page_tables.items()
        )
        return "\n".join(lines)

    def print_page_tables(self) -> None:
        self._write("\n" + self.render_page_tables() + "\n")

    def render_frame_table(self) -> str:
        header = f"=== Frame Table ({self.total_frames} frames) ===\n"
        return header + "".join(map(_cell, self._frames))

    def print_frame_table(self) -> None:
        self._write("\n" + self.render_frame_table() + "\n")