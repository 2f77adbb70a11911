# uniformarray

`uniformarray` turns a dataclass whose fields all share one type into
something that can be indexed like a fixed-length sequence. Decorate the
dataclass with `uniform_array` and it gains:

- `len(obj)` and `obj.is_empty()`: the number of fields, fixed when the class
  is decorated.
- `obj[i]` and `obj[i] = value`: read and write access to the fields by
  position, in declaration order. An index outside the fields raises
  `IndexError`. These two are added only to classes that have fields.

The decorator raises `UniformArrayError` (a subclass of `TypeError`) when:

- the class is not a dataclass;
- a field's type differs from the type of the first field;
- the class already defines one of the members the decorator would add.

Field types are compared by name. Fields named `_0`, `_1`, ... are treated as
positional fields, which only changes how they are named in the error message
(`.1` rather than `"b"`).

## Installation

```
pip install uniformarray
```

## Usage

```python
from dataclasses import dataclass

from uniformarray.derive import uniform_array


@uniform_array
@dataclass
class Vec4:
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0


v = Vec4()
assert len(v) == 4
v[1] = 1.0
assert v[1] == 1.0 and v.b == 1.0
```

### Gated slice access

Four further members can be guarded by a feature name. Pass `safety_gate` to
name the feature and `features` (an iterable of names, or a single string) to
say which features are enabled. The members are added only when the class has
fields and its gate is among the enabled features:

- `Cls.from_slice(values)`: a read-only instance whose fields are read from
  `values`; assigning a field raises `AttributeError`.
- `Cls.from_mut_slice(values)`: an instance whose fields are stored in
  `values`, so that writes to the instance change `values`.
- `obj.as_ref()`: a read-only live sequence view of the fields.
- `obj.as_mut()`: a writable live sequence view of the fields.

`from_slice` and `from_mut_slice` raise `ValueError` if the length of
`values` differs from the number of fields.

```python
@uniform_array(safety_gate="unsafe", features={"unsafe"})
@dataclass
class Named:
    a: float = 0.0
    b: float = 0.0


data = [1.0, 2.0]
n = Named.from_mut_slice(data)
n.b = 5.0
assert data == [1.0, 5.0]

m = Named()
m.as_mut()[0] = 3.0
assert m.a == 3.0
```

`uniform_fields(cls)` returns the names of a dataclass's fields in order,
after checking that they share one type.

### Examples

`uniformarray.example` holds sample classes, decorated with the features in
`FEATURES` (`{"unsafe"}`):

- `Named`: four `float` fields, gated by `"unsafe"`, so it has the slice
  members.
- `NamedGeneric`: four fields of a generic type, gated by `"unsafest"`, so it
  has only length and index access.
- `Newtype` and `Tuple`: one and two positional `int` fields.
- `Unit`: no fields; only `len` and `is_empty`.

## Running the tests

```
pip install -e ".[test]"
pytest
```