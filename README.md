# ke2tools

ke2tools is a set of pure-Python helpers for engine and tooling code. It needs nothing outside the standard library.

## What is in it

- `ke2tools.vector.Vector` is a mutable numeric vector.
  - Arithmetic with a number works on every component. Arithmetic with another vector works element by element, and both vectors must have the same length.
  - It provides `length_sq`, `length`, `normalize`, `dot_fl`, `dot`, `cross_fl` and `cross`.
  - `Vector.filled(size, value)` builds a vector with every component set to `value`.
  - `Vector.dists_to_shortest_distance` and `Vector.shortest_distance` work on two lines given as a point and a direction each.
- `ke2tools.matrix.Matrix` is a column-major matrix of `size_x` columns by `size_y` rows.
  - Constructors: `from_columns`, `filled` and `identity`.
  - `*` and `@` multiply by a matrix or a vector. `+`, `-`, `*` and `/` with a number act on every element.
  - Linear algebra: `determinant`, `inverse` and `normalize`.
  - `cross_fix_3d` makes a 3x3 basis orthogonal again.
  - Local coordinates: `local_coord_c` and `local_coords_u`.
  - Rotation: `rotate_vector_c`, `rotate_vector_by_two_vectors_u` and `rotate_3d_by_angles_c`.
  - `to_vector` returns all elements as one vector.
- `ke2tools.event` contains `Event` and `EventConnections`.
  - `EventConnections.connect(event, func, check, priority)` returns a connection id. `remove_connection(id)` removes that connection, and an unknown id raises `InvalidConnectionIdError`. `close()`, or leaving a `with` block, removes every connection the object owns.
  - `Event.fire(data)` runs every check first. It then calls, in priority order, the handlers whose check passed.
- `ke2tools.connections` contains the slot classes.
  - A `ConnectionSlot` links to at most one other slot.
  - A `BindingSlot` appends itself to a holder list. It removes itself from that list when it is disconnected.
- `ke2tools.errors` contains the error types and the `Reporter`.
  - `KE2Error` is the base exception of the package.
  - `Reporter.warn` writes `KE2 Warning: {...}` to a stream.
  - `Reporter.fail` writes `KE2 Error: {...}` and raises the given error with that message.
  - Non-ASCII characters in messages become `?`; see `sanitize_message`.
  - The module-level `warn` and `fail` use a default reporter that writes to standard output.
- `ke2tools.binary_search.binary_search(seq, value, less, equal)` finds the insertion position of `value` in a sorted sequence.
- `ke2tools.bools_table.BoolsTable` holds a fixed number of booleans packed into bits. `to_bytes` returns the packed bytes.
- `ke2tools.memory_region.overlapping_region(start1, len1, start2, len2)` returns `(start, length)` of the overlap of two ranges, or `None` when they do not overlap.
- `ke2tools.timing` measures and waits on the monotonic clock.
  - `time_point` and `elapsed` read the clock.
  - `duration` gives the seconds between two points.
  - `wait` sleeps for whole milliseconds.
- `ke2tools.random_number.rand_num(start, end)` returns a uniform random number.
- `ke2tools.encoding` converts between text and bytes of a numbered code page, such as 1251 or 65001. Its functions are `decode_code_page` and `encode_code_page`.
- `ke2tools.obj_reader.read_obj(path)` reads the `v` and `f` lines of a Wavefront `.obj` file.
  - Faces must have three or four vertices; quads are split into two triangles.
  - The result is a flat list of floats with 11 values per vertex: position, smoothed normal, face normal, and two texture coordinates that are always zero.
  - Start and end messages go to the `logging` module.

## Example

```python
from ke2tools.vector import Vector
from ke2tools.matrix import Matrix
from ke2tools.event import Event, EventConnections

v = Vector(1.0, 2.0, 2.0)
print(v.length())                          # 3.0
print(v.cross_fl(Vector(0.0, 0.0, 1.0)))   # Vector(2.0, -1.0, 0.0)

m = Matrix.identity(3)
print(m.determinant())                     # 1.0
print(m @ v)                               # Vector(1.0, 2.0, 2.0)

event = Event()
with EventConnections() as conns:
    conns.connect(event, lambda data: print("got", data), None, None)
    event.fire(42)                         # got 42
```

## What it does not do

ke2tools holds maths and utility code only. It has no window handling, rendering, input handling or file dialogs, and it provides no command-line program. `read_obj` does not read texture coordinates or normals from the file. It does not handle faces with more than four vertices.

## Running the tests

```
pip install -e .[test]
pytest
```