"""Command that runs the demonstration scheduling scenario."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from ossim.memory import MemoryManager
from ossim.process import AllocationMode, ProcessManager


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim",
        description="Simulate round-robin scheduling with contiguous and paged memory.",
    )
    parser.add_argument(
        "--tick",
        type=float,
        default=0.3,
        help="seconds to pause per simulated time unit (default: 0.3)",
    )
    args = parser.parse_args(argv)

    memory = MemoryManager(40, 4)
    manager = ProcessManager(memory, tick=args.tick)

    manager.create_process(6, 6, 0, AllocationMode.CONTIGUOUS)
    manager.create_process(4, 10, 1, AllocationMode.PAGED)
    manager.create_process(5, 8, 2, AllocationMode.PAGED)

    manager.run_round_robin(2)

    memory.print_memory()
    memory.print_frame_table()
    memory.print_page_tables()
    manager.print_process_table()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())