from quadrato.mesh import Mesh, join, loft
from quadrato.weld import (HASH_SYMBOLS, bucket_keys, compact_map, hash_buckets, merge_map, weld,
                           weld_vertices)


def _row(y):
    return [(0.0, y, 0.0), (1.0, y, 0.0), (2.0, y, 0.0)]


def _two_patches():
    mesh = loft([_row(0.0), _row(1.0)])
    return join(mesh, loft([_row(1.0), _row(2.0)]))


def test_identical_vertices_collapse():
    vertices, faces = weld([(0, 0, 0), (0, 0, 0), (1, 0, 0)], [(0, 2), (1, 2)])
    assert vertices == [(0, 0, 0), (1, 0, 0)]
    assert faces == [(0, 1), (0, 1)]


def test_distinct_vertices_keep_identity():
    kept, remap = weld_vertices([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)])
    assert len(kept) == 4
    assert remap == [0, 1, 2, 3]


def test_merge_within_tolerance_only():
    near = [(0, 0, 0), (1, 1, 1), (1e-5, 0, 0)]
    assert merge_map(near) == [0, 1, 0]
    far = [(0, 0, 0), (1, 1, 1), (1e-3, 0, 0)]
    assert merge_map(far) == [0, 1, 2]


def test_lowest_index_wins():
    assert merge_map([(2, 2, 2), (0, 0, 0), (2, 2, 2), (2, 2, 2)]) == [0, 1, 0, 0]


def test_compact_map_shifts_and_merges():
    assert compact_map([0, 1, 0, 3, 1]) == [0, 1, 0, 2, 1]
    assert compact_map([0, 0, 2, 2, 4]) == [0, 0, 1, 1, 2]


def test_bucket_keys_span_alphabet():
    keys = bucket_keys([(0, 0, 0), (1, 1, 1)])
    assert keys == ["aaa", "..."]
    assert all(len(k) == 3 and set(k) <= set(HASH_SYMBOLS) for k in keys)


def test_hash_buckets_group_indices_in_order():
    buckets = hash_buckets([(0, 0, 0), (1, 1, 1), (0, 0, 0)])
    assert buckets == {"aaa": [0, 2], "...": [1]}


def test_cross_bucket_duplicates_are_not_merged():
    # x = 0 is a bucket boundary for this bounding box
    vertices = [(-1, 0, 0), (1, 0, 0), (-2e-5, 0, 0), (2e-5, 0, 0)]
    kept, _ = weld_vertices(vertices)
    assert len(kept) == 4


def test_weld_patches_sharing_an_edge():
    mesh = _two_patches()
    assert len(mesh.vertices) == 12
    welded = mesh.weld()
    assert len(welded.vertices) == 9
    assert len(welded.faces) == len(mesh.faces)
    assert welded.faces[2:] == [(4, 3, 6, 7), (5, 4, 7, 8)]
    welded.check_indices()
    # the input mesh is left as it was
    assert len(mesh.vertices) == 12
    assert mesh.faces[2] == (7, 6, 9, 10)


def test_weld_is_idempotent():
    once = _two_patches().weld()
    twice = once.weld()
    assert twice.vertices == once.vertices
    assert twice.faces == once.faces


def test_weld_empty_mesh():
    welded = Mesh().weld()
    assert welded.vertices == []
    assert welded.faces == []
