# oslab

Small, self-contained simulations of classic operating-systems topics,
each usable as a library module and as a command-line tool. There are no
third-party dependencies.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `oslab-disksched HEAD DIRECTION` | Reads up to 1000 native integers from `request.bin` in the current directory and reports the service order and total head movement for FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK on a 300-track disk. `HEAD` must be 0–299, `DIRECTION` is `LEFT` or `RIGHT`. |
| `oslab-fileinfo PATH` | Prints inode, size, blocks, permissions (octal and `rwx` form), owner uid and the access, modification and status-change times of a file. |
| `oslab-intsum [PATH]` | Reads ten native 32-bit integers from `numbers.bin` (or `PATH`) and prints their sum. |
| `oslab-translate [PATH]` | Translates the logical addresses in `labaddr.txt` (or `PATH`) through a fixed eight-entry page table with 4 KiB pages; addresses past the table are reported on standard error. |
| `oslab-vmm [STORE [ADDRESSES]]` | Virtual memory manager: translates the addresses in `addresses.txt` against `BACKING_STORE.bin`, with 256-byte pages, a 16-entry TLB and 128 frames replaced in FIFO order, then reports total addresses, page faults and TLB hits. |
| `oslab-pagesim [STORE [ADDRESSES]]` | A variant of the same simulation that reads `../BACKING_STORE.bin` and `../addresses.txt` by default, treats addresses as 16-bit, and on eviction rewrites the TLB entry of the evicted page before adding the new one. |
| `oslab-tasim` | The sleeping teaching-assistant problem: students, hallway chairs and one TA, simulated with threads. Options: `--students`, `--chairs`, `--duration` (seconds; runs until interrupted if omitted), `--seed`, `--time-scale`. |
| `oslab-threadsum [INT ...]` | Sums the numbers 1 to 20 (or the integers given) with two worker threads sharing a lock. |
| `oslab-shell` | A tiny interactive shell (`osh>`) with background jobs (`&`), `history`, `!!` and `exit`. |
| `oslab-forktree` | Builds a fixed tree of child processes with `fork` and prints each process id in creation order. |
| `oslab-bank DEPOSIT WITHDRAW` | Three withdrawing and three depositing threads update one shared balance under a lock, then the final amount is printed. |
| `oslab-bank-bounded AMOUNT` | Seven depositors and three withdrawers whose transactions are bounded by semaphores so the balance stays between 0 and 400. If `AMOUNT` leaves too few slots for every thread, the run blocks. |

## Library use

```python
from oslab.disksched import Direction, fcfs, scan

requests = [98, 183, 37, 122, 14, 124, 65, 67]
print(fcfs(requests, 53))                      # Schedule(tracks=..., total=..., start=None)
print(scan(requests, 53, Direction.LEFT, 300))
```

```python
from oslab.shell import History, parse_args

history = History()
history.add("ls -l")
print(history.format())          # "1 ls -l\n"
print(parse_args("sleep 5 &"))   # (['sleep', '5'], True)
```

```python
from oslab.threadsum import parallel_sum

print(parallel_sum(range(1, 21), 2))   # 210
```

Other modules:

- `oslab.disksched`: `read_requests`, `sstf`, `cscan`, `look`, `clook`, `format_report`.
- `oslab.fileinfo`: `permission_string`, `describe`.
- `oslab.intsum`: `read_ints`.
- `oslab.translate`: `translate`, `translate_lines`, `InvalidPageError`.
- `oslab.vmm`: `TLB`, `VirtualMemory`, `Translation`, `run`.
- `oslab.pagesim`: `TLB`, `Pager`, `Access`, `run`.
- `oslab.tasim`: `Hallway`, `run`.
- `oslab.forktree`: `Node`, `process_tree`, `walk`, `run_tree`.
- `oslab.bank`: `Account`, `BoundedAccount`, `run_unbounded`, `run_bounded`.

## Limits

Everything here is a user-space simulation. The package does not load
anything into the kernel or create `/proc` entries. `oslab-forktree` needs
`os.fork` and so runs only on POSIX systems; `oslab-shell` runs commands as
child processes and has no pipes, redirection or built-ins beyond
`history`, `!!` and `exit`.