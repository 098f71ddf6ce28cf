# ossim

A small operating-system simulator for the classroom. It models a process
table, a Round Robin CPU scheduler and two memory allocation schemes:

- **contiguous** allocation with First-Fit, falling back to one compaction
  pass when no hole is large enough;
- **paged** allocation, where memory is split into fixed-size frames and each
  process gets a page table.

Every step of the simulation is reported on the output (the messages are in
Spanish), so the trace can be read alongside a lecture on scheduling and
memory management.

## Installation

```
pip install .
```

## Running the demonstration

```
ossim
```

This runs the built-in scenario: 40 memory blocks split into 10 frames of
4 blocks each, one process with contiguous allocation and two with paged
allocation, scheduled with Round Robin at quantum 2. The final memory map,
frame table, page tables and process table are printed at the end.

The simulation pauses 0.3 seconds per simulated time unit. Change that with
`--tick`; `--tick 0` runs it without pausing:

```
ossim --tick 0
```

## Using the library

```python
from ossim.memory import MemoryManager
from ossim.process import AllocationMode, ProcessManager

memory = MemoryManager(40, 4)
manager = ProcessManager(memory, tick=0)

manager.create_process(6, 6, 0, AllocationMode.CONTIGUOUS)
manager.create_process(4, 10, 1, AllocationMode.PAGED)

final_time = manager.run_round_robin(2)

memory.print_memory()
memory.print_frame_table()
memory.print_page_tables()
manager.print_process_table()
```

### `ossim.memory`

`MemoryManager(total_size, frame_size=4, out=None)` holds `total_size` blocks,
divided into `total_size // frame_size` frames.

- `allocate_first_fit(pid, size)` claims the first free run of `size` blocks,
  compacting memory once if no run is found, and returns the start block.
  It raises `OutOfMemoryError` (with `pid` and `needed` attributes) when even
  after compaction there is no room. `find_and_allocate_first_fit` is the
  single attempt without compaction; it returns the start block or `None`.
- `free(pid)` releases the blocks of a process; `compact()` slides all used
  blocks to the start of memory, keeping their order.
- `pages_needed(size)` gives the number of frames for `size` blocks, rounded up.
- `allocate_paged(pid, pages_needed)` assigns the lowest free frames and
  returns their numbers, or raises `OutOfMemoryError`; `free_paged(pid)`
  releases them and ignores unknown pids.
- `memory`, `frame_table` and `page_tables` expose the current state
  (`None` marks a free block or frame).

### `ossim.process`

`ProcessManager(memory, out=None, tick=0.3)` schedules processes over a
`MemoryManager`. `tick` is the number of seconds to sleep per simulated time
unit; `0` disables pausing.

- `create_process(burst_time, memory_required, arrival_time, mode=AllocationMode.CONTIGUOUS)`
  registers a process (a `PCB`) and returns its pid, starting at 1.
- `admit_process(pid)` allocates memory and queues the process, returning
  whether it was admitted; a process that does not fit stays in `NUEVO` and
  is retried at later time steps. `admit_by_time(t)` admits every new process
  that has arrived by time `t`.
- `run_round_robin(quantum)` runs until every process has terminated and
  returns the final system time; a quantum below 1 raises `ValueError`.
- `processes` and `ready_queue` expose the current state.

Process states are given by `ossim.states.ProcessState`: `NUEVO`, `LISTO`,
`EJECUCION` and `TERMINADO`.

### Output

`MemoryManager` and `ProcessManager` both write their trace to the `out`
stream given, or to standard output. The `render_memory`,
`render_frame_table`, `render_page_tables` and `render_process_table` methods
return the tables as strings; the matching `print_*` methods write them to
the trace.

## Running the tests

```
pip install ".[test]"
pytest
```