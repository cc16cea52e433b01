import uuid

import numpy as np
import pytest

from sillyengine.component import Transform3D
from sillyengine.demo import TestModel, TestObj
from sillyengine.mesh import RED, Mesh

IDENTITY_ROTATION = (0.0, 0.0, 0.0, 1.0)


def make_obj(position=(1.0, 0.5, 0.0)):
    transform = Transform3D(position, IDENTITY_ROTATION, (10.0, 10.0, 10.0))
    return TestObj(transform, TestModel())


def test_model_is_red_cube():
    gm = TestModel().gm()
    assert gm.color == RED
    assert np.array_equal(gm.mesh.positions, Mesh.cube().positions)
    assert np.array_equal(gm.mesh.indices, Mesh.cube().indices)


def test_model_clone_is_new_instance():
    model = TestModel()
    clone = model.clone()
    assert clone is not model
    assert clone == model


def test_update_moves_along_x_by_delta():
    obj = make_obj()
    obj.update(0.5)
    obj.update(0.25)
    assert obj.transform().position[0] == pytest.approx(1.0 + 0.5 + 0.25)
    assert obj.transform().position[1:].tolist() == [0.5, 0.0]


def test_physics_update_leaves_transform_alone():
    obj = make_obj()
    obj.physics_update(1.0)
    assert obj.transform().position.tolist() == [1.0, 0.5, 0.0]


def test_transform_changes_move_object():
    obj = make_obj()
    obj.transform().position[0] += 1.0
    assert obj.transform().position[0] == pytest.approx(2.0)


def test_id_is_fresh_each_call():
    obj = make_obj()
    ids = [obj.id() for _ in range(5)]
    assert len(set(ids)) == 5
    assert all(isinstance(i, uuid.UUID) and i.version == 4 for i in ids)


def test_model_returns_independent_shared_copy():
    obj = make_obj()
    first, second = obj.model(), obj.model()
    assert first is not second
    with first as m1, second as m2:
        assert m1 is not m2
        assert m1.gm().color == RED


def test_clone_has_independent_transform():
    obj = make_obj()
    clone = obj.clone()
    clone.update(3.0)
    assert obj.transform().position[0] == pytest.approx(1.0)
    assert clone.transform().position[0] == pytest.approx(4.0)


def test_base_clone_copies_deeply():
    obj = make_obj()
    clone = super(TestObj, obj).clone()
    clone.transform().position[2] = 7.0
    assert obj.transform().position[2] == 0.0
    with clone.model() as m:
        assert m.gm().color == RED