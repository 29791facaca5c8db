"""End-to-end tests through the MPM front end."""

import os

import numpy as np
import pytest


def make_sphere_problem(has_gravity=False, order=1):
    from pointmpm import MPM
    mpm = MPM(log=False)
    mpm.set_configuration(log=False, cell_number=[1, 1, 1], cell_width=1., has_gravity=has_gravity)
    mpm.add_material(model="LinearElastic", material={"MaterialID": 0, "YoungModulus": 1e3, "PossionRatio": 0.3}, log=False)
    mpm.add_boundary_condition(["Free"] * 6, log=False)
    mpm.add_geometry({"Type": "Sphere", "Center": [0.5, 0.5, 0.5], "Radius": 0.1, "Density": 1000., "MaterialID": 0}, log=False)
    mpm.initialize(order=order, log=False)
    return mpm


def snapshot_indices(tmp_path, basename):
    return sorted(int(name.rsplit(".", 1)[1]) for name in os.listdir(tmp_path) if name.startswith(basename + ".csv."))


def test_write_schedule(tmp_path, capsys):
    mpm = make_sphere_problem()
    output_file = str(tmp_path / "sphere")
    mpm.solve(num_time_steps=5, time_step_size=1e-3, output_file=output_file, write_frequency=2)

    assert snapshot_indices(tmp_path, "sphere") == [0, 1, 2, 3]
    out = capsys.readouterr().out
    assert "Time Step 2/5: 0.002 (s)" in out
    assert "Time Step 4/5: 0.004 (s)" in out
    assert "Time Step 5/5" not in out

    with open(output_file + ".csv.3") as f:
        assert f.read() == "x, y, z, velocity magnitude\n0.5, 0.5, 0.5, 0\n"


def test_write_schedule_when_frequency_divides_steps(tmp_path):
    mpm = make_sphere_problem()
    mpm.solve(num_time_steps=4, time_step_size=1e-3, output_file=str(tmp_path / "sphere"), write_frequency=2)
    assert snapshot_indices(tmp_path, "sphere") == [0, 1, 2, 3]
    with open(str(tmp_path / "sphere") + ".csv.2") as f:
        periodic = f.read()
    with open(str(tmp_path / "sphere") + ".csv.3") as f:
        assert f.read() == periodic


def test_falling_sphere(tmp_path):
    dt, steps = 1e-3, 10
    mpm = make_sphere_problem(has_gravity=True)
    mpm.set_solver({"Timestep": dt, "NumTimeSteps": steps, "WriteFrequency": 5, "OutputFile": str(tmp_path / "falling")}, log=False)
    mpm.run()
    data = mpm.get_particle_data()
    assert data["position"].shape == (1, 3)
    assert np.allclose(data["velocity"][0], [0., 0., -9.81 * dt * steps])
    assert data["position"][0, 2] < 0.5
    assert np.allclose(data["position"][0, :2], 0.5)
    assert np.isclose(data["mass"][0], 1000.)


def test_initialization_by_order():
    mpm = make_sphere_problem(order=3)
    data = mpm.get_particle_data()
    # only the centre candidate of a 3x3x3 subdivision lies within radius 0.1
    assert data["position"].shape == (1, 3)
    assert np.isclose(data["volume"][0], 1. / 27.)
    assert np.allclose(data["deformation_gradient"][0], np.eye(3))


def test_callback_functions(tmp_path):
    calls = []
    mpm = make_sphere_problem()
    mpm.set_solver({"Timestep": 1e-3, "NumTimeSteps": 3, "OutputFile": str(tmp_path / "cb")}, log=False)
    mpm.run(function=lambda sims, scene: calls.append(sims.current_step))
    assert calls == [1, 2, 3]


def test_run_requires_configuration(tmp_path):
    from pointmpm import MPM
    mpm = MPM(log=False)
    with pytest.raises(RuntimeError):
        mpm.run()
    with pytest.raises(RuntimeError):
        mpm.initialize(order=1, log=False)

    mpm.set_configuration(log=False, cell_number=[1, 1, 1], cell_width=1.)
    mpm.set_solver({"Timestep": 1e-3, "NumTimeSteps": 1, "OutputFile": str(tmp_path / "none")}, log=False)
    with pytest.raises(RuntimeError):
        mpm.run()


def test_boundary_dictionary(tmp_path):
    mpm = make_sphere_problem()
    mpm.add_boundary_condition({"-z": "NoSlip", "+z": "FreeSlip"}, log=False)
    names = [boundary.name for boundary in mpm.scene.boundary]
    assert names == ["Free", "Free", "Free", "Free", "NoSlip", "FreeSlip"]


def test_initialize_from_geometry_dictionaries():
    from pointmpm import MPM
    mpm = MPM(log=False)
    mpm.set_configuration(log=False, cell_number=[2, 1, 1], cell_width=1., has_gravity=False)
    mpm.add_material(model="LinearElastic", material={"MaterialID": 0, "YoungModulus": 1e3, "PossionRatio": 0.3}, log=False)
    mpm.add_boundary_condition(["Free"] * 6, log=False)
    mpm.initialize(order=1, log=False, geometries=[
        {"Type": "Sphere", "Center": [0.5, 0.5, 0.5], "Radius": 0.1, "Density": 1000.},
        {"Type": "Box", "Bounds": [1., 2., 0., 1., 0., 1.], "Density": 500., "InitialVelocity": [1., 0., 0.]}])

    data = mpm.get_particle_data()
    assert np.allclose(data["position"], [[0.5, 0.5, 0.5], [1.5, 0.5, 0.5]])
    assert np.allclose(data["mass"], [1000., 500.])
    assert np.allclose(data["velocity"], [[0., 0., 0.], [1., 0., 0.]])


def test_initialize_from_single_geometry_dictionary():
    from pointmpm import MPM
    mpm = MPM(log=False)
    mpm.set_configuration(log=False, cell_number=[1, 1, 1], cell_width=1.)
    mpm.initialize(order=1, log=False, geometries={"Type": "Sphere", "Center": [0.5, 0.5, 0.5], "Radius": 0.1, "Density": 1000.})
    assert mpm.get_particle_data()["position"].shape == (1, 3)
