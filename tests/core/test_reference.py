"""Tests for the reference map."""

from structclone import ReferenceMap


def test_lookup_is_by_identity_not_equality():
    """Equal but distinct originals are distinct entries."""
    refs = ReferenceMap()
    a, b = [1, 2], [1, 2]
    copy_a = [1, 2]

    refs.set(a, copy_a)

    assert a in refs
    assert b not in refs
    assert refs.get(a) is copy_a
    assert refs.get(b) is None


def test_first_write_wins():
    """CRITICAL: Re-registering an original never replaces its copy.

    Why: Shells are registered before population; a later overwrite would
    split references that must point at the same copy.
    """
    refs = ReferenceMap()
    original = {}
    first, second = {}, {}

    assert refs.set(original, first) is True
    assert refs.set(original, second) is False
    assert refs.get(original) is first
    assert len(refs) == 1


def test_get_default_for_missing():
    refs = ReferenceMap()
    sentinel = object()

    assert refs.get([], sentinel) is sentinel


def test_inputs_and_outputs_are_parallel():
    refs = ReferenceMap()
    originals = [[], {}, set()]
    copies = [[], {}, set()]
    for original, output in zip(originals, copies):
        refs.set(original, output)

    assert all(x is y for x, y in zip(refs.inputs, originals))
    assert all(x is y for x, y in zip(refs.outputs, copies))
    assert [(id(i), id(o)) for i, o in refs] == [(id(i), id(o)) for i, o in zip(originals, copies)]


def test_keeps_originals_alive():
    """Registered originals are held so their ids cannot be recycled mid-call."""
    refs = ReferenceMap()
    refs.set([1], [1])

    (original,) = refs.inputs
    assert original == [1]
