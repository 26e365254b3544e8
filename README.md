# tinkerkit

A small toolbox of classic data structures (linked lists, array-backed and
linked queues, a linked stack, a max-heap), a few algorithms, some text and
file helpers, and minimal socket programs: a tiny HTTP server, a HEAD request
client and a bridge between TCP and a serial device.

It has no third-party dependencies. The serial bridge uses `termios` and so
runs on POSIX systems only.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `tinkerkit.array_queue` | bounded `LinearQueue` and `CircularQueue`, `QueueFullError`, `QueueEmptyError` |
| `tinkerkit.linked_list` | `Node`, singly linked `LinkedList` with merge sort; `find_middle`, `merge_sorted`, `merge_sort_nodes` over raw node chains |
| `tinkerkit.circular_list` | `CircularList` |
| `tinkerkit.doubly_list` | `DoublyLinkedList` with forward and `reversed()` iteration |
| `tinkerkit.linked_queues` | `LinkedQueue`, `LinkedDeque`, `LinkedStack`, `EmptyContainerError` |
| `tinkerkit.heap` | growable `MaxHeap` |
| `tinkerkit.sorting` | `merge_sort` (stable), `quick_sort` (last value as pivot) |
| `tinkerkit.algorithms` | `fibonacci`, `count_n_queens`, `popcount`, `parse_decimal` |
| `tinkerkit.textutils` | `total_length`, `find_substring`, `reverse_string`, `strip_extension`, `reverse_words` |
| `tinkerkit.fileutils` | `echo`, `remove_executables`, `run_student_script` |
| `tinkerkit.httpserver` | `build_response`, `user_agent_response`, `url_echo_response`, `handle_client`, `serve` |
| `tinkerkit.headclient` | `head_request` |
| `tinkerkit.uart_bridge` | `open_uart`, `forward_to_uart`, `serve_uart` |

Containers raise exceptions rather than returning sentinels: a full bounded
queue raises `QueueFullError`, an empty one `QueueEmptyError`; the linked
queue, deque and stack raise `EmptyContainerError`; `MaxHeap.get_max` and
`MaxHeap.delete_max` raise `IndexError` on an empty heap. `update` on the
linked lists raises `KeyError` when the key is absent, and positional inserts
and deletes raise `IndexError` for an out-of-range position.

## Examples

```python
from tinkerkit.sorting import merge_sort
from tinkerkit.algorithms import count_n_queens, popcount, fibonacci
from tinkerkit.textutils import strip_extension, reverse_words

merge_sort([4, 5, 3, 1])           # [1, 3, 4, 5]
count_n_queens(8)                  # 92
popcount(0b11111111)               # 8
fibonacci(10)                      # 55
strip_extension("archive.tar.gz")  # "archive.tar"
reverse_words("one two three")     # "three two one"
```

```python
from tinkerkit.array_queue import CircularQueue
from tinkerkit.linked_list import LinkedList

queue = CircularQueue(3)
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()      # 10
queue.display()      # "Queue elements are: 20"

items = LinkedList([5, 6, 2])
items.sort()
list(items)          # [2, 5, 6]
items.render()       # "2 5 6"
```

```python
from tinkerkit.heap import MaxHeap

heap = MaxHeap(1)
for value in (10, 20, 15):
    heap.insert(value)
heap.get_max()      # 20
heap.delete_max()   # 20
```

```python
from tinkerkit.httpserver import build_response

build_response(b"GET /echo/abc HTTP/1.1\r\n\r\n")
# b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 3\r\n\r\nabc\r\n\r\n"
```

## Commands

Installing the package provides these commands:

- `tinkerkit-files echo` copies standard input to standard output.
- `tinkerkit-files rm-exec DIRECTORY` deletes the regular files in the
  directory that their owner may execute and prints each deleted path.
- `tinkerkit-files students [COUNT] [--script PATH] [--details FILE]` runs the
  record script (default `./script.py`) with the count, asking for it if it
  is not given, then prints each line of the details file (default
  `student_detail.txt`).
- `tinkerkit-http [IP] PORT` serves HTTP on the address (default `0.0.0.0`),
  answering `/` with an empty 200, `/echo/<text>` with the text, and anything
  else with 404. Each client is handled in its own thread.
- `tinkerkit-head [HOST] [PORT]` sends `HEAD / HTTP/1.0` (defaults
  `192.168.1.39` and `8080`) and prints the reply.
- `tinkerkit-uart-client IP PORT [--device PATH]` connects to a TCP server and
  writes what it receives to the serial device (default `/dev/serial0`, 9600
  baud, 8N1), dropping the first five reads and pausing a second after each
  forwarded read.
- `tinkerkit-uart-server IP PORT DEVICE` listens on the address and sends what
  it reads from the device to each connected client in turn; SIGINT or SIGTERM
  stops it cleanly.

Run any of them with `--help` to see the arguments it takes.

## What it does not do

The package has no array-backed stack, no graph type or graph traversals
(breadth-first, depth-first, cycle detection, connected components) and no
binary search tree. The HTTP server answers one request per connection and
knows only the paths above; it is not a general web server.