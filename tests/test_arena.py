import pytest
from hypothesis import given, strategies as st

from tinylisp.errors import ArenaExhausted
from tinylisp.types.arena import Arena
from tinylisp.types.value import Tag, box, make_number, ordinal, tag_of

names = st.text(st.characters(min_codepoint=1), min_size=1, max_size=40)
words = st.integers(min_value=0, max_value=2**64 - 1)


@given(names)
def test_interning_twice_returns_the_same_atom(name):
    arena = Arena(1024)
    first = arena.intern(name)
    assert tag_of(first) is Tag.ATOM
    hp = arena.hp
    assert arena.intern(name) == first
    assert arena.hp == hp
    assert arena.atom_name(ordinal(first)) == name


@given(st.lists(names, min_size=2, max_size=10, unique=True))
def test_distinct_names_get_distinct_atoms(batch):
    arena = Arena(1024)
    atoms = [arena.intern(n) for n in batch]
    assert len(set(atoms)) == len(batch)
    assert [arena.atom_name(ordinal(a)) for a in atoms] == batch


def test_heap_grows_upward_with_terminators():
    arena = Arena(16)
    a = arena.intern("abc")
    b = arena.intern("de")
    assert ordinal(a) == 0
    assert ordinal(b) == 4
    assert arena.hp == 7


def test_invalid_names_are_rejected():
    arena = Arena(16)
    with pytest.raises(ValueError):
        arena.intern("")
    with pytest.raises(ValueError):
        arena.intern("a\0b")


@given(words, words)
def test_pair_round_trip(x, y):
    arena = Arena(16)
    p = arena.alloc_cell(x, y)
    assert tag_of(p) is Tag.CONS
    assert arena.load_car(ordinal(p)) == x
    assert arena.load_cdr(ordinal(p)) == y


def test_stack_grows_downward_two_slots_per_cell():
    arena = Arena(16)
    p = arena.alloc_cell(make_number(1), make_number(2))
    q = arena.alloc_cell(p, box(Tag.NIL, 0))
    assert ordinal(p) == 14
    assert ordinal(q) == 12
    assert arena.sp == 12
    assert arena.load_car(ordinal(q)) == p


def test_stack_exhaustion_is_fatal():
    arena = Arena(4)
    arena.alloc_cell(1, 2)
    arena.alloc_cell(3, 4)
    with pytest.raises(ArenaExhausted):
        arena.alloc_cell(5, 6)
    assert arena.sp == 0


def test_heap_exhaustion_is_fatal():
    arena = Arena(1)
    arena.intern("abcdefg")  # exactly 8 bytes with its terminator
    with pytest.raises(ArenaExhausted):
        arena.intern("x")
    assert arena.hp == 8


def test_heap_and_stack_share_one_bound():
    arena = Arena(2)
    arena.alloc_cell(1, 2)
    with pytest.raises(ArenaExhausted) as info:
        arena.intern("a")
    assert isinstance(info.value, MemoryError)
    assert info.value.sp == 0


def test_heap_and_stack_alias_the_same_buffer():
    arena = Arena(4)
    arena.intern("abcdefg")
    assert arena.words[0] != 0  # name bytes are visible through the word view


def test_rewind_and_free_cells():
    arena = Arena(8)
    arena.intern("abc")
    assert arena.free_cells == 8
    arena.alloc_cell(1, 2)
    mark = arena.sp
    arena.alloc_cell(3, 4)
    assert arena.free_cells == 4
    arena.rewind(mark)
    assert arena.sp == mark
    with pytest.raises(ValueError):
        arena.rewind(mark - 2)


def test_lone_surrogates_are_stored_and_read_back():
    arena = Arena(64)
    a = arena.intern("x\udcff")
    b = arena.intern("x\ud800")
    assert a != b
    assert arena.atom_name(ordinal(a)) == "x\udcff"
    assert arena.intern("x\udcff") == a
