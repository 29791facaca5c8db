"""Tests for keyword dictionaries, simulation settings and the runtime helpers."""

import numpy as np
import pytest


def test_dict_io_is_case_insensitive():
    from pointmpm.utils.ObjectIO import DictIO
    dictionary = {"Timestep": 1e-3, "OutputFile": "out"}
    assert DictIO.GetEssential(dictionary, "timestep") == 1e-3
    assert DictIO.GetEssential(dictionary, "dt", "TIMESTEP") == 1e-3
    assert DictIO.GetAlternative(dictionary, "outputfile", "default") == "out"
    assert DictIO.GetAlternative(dictionary, "WriteFrequency", 10) == 10
    assert DictIO.GetOptional(dictionary, "CFL") is None
    with pytest.raises(KeyError):
        DictIO.GetEssential(dictionary, "NumTimeSteps")


def test_read_dict_list():
    from pointmpm.utils.ObjectIO import read_dict_list
    seen = []
    read_dict_list({"a": 1}, lambda d, tag: seen.append((tag, d["a"])), tag="x")
    read_dict_list([{"a": 2}, {"a": 3}], lambda d, tag: seen.append((tag, d["a"])), tag="y")
    assert seen == [("x", 1), ("y", 2), ("y", 3)]
    with pytest.raises(TypeError):
        read_dict_list("a", print)


def test_simulation_setters():
    from pointmpm.mpm.Simulation import Simulation
    sims = Simulation()
    assert np.allclose(sims.get_gravity(), [0., 0., -9.81])
    sims.set_has_gravity(False)
    assert np.allclose(sims.get_gravity(), 0.)

    sims.set_cell_width(0.5)
    assert sims.cell_width == [0.5, 0.5, 0.5]
    sims.set_timestep(1e-3)
    sims.set_num_time_steps(20)
    assert np.isclose(sims.get_simulation_time(), 0.02)

    with pytest.raises(ValueError):
        sims.set_cell_number([1, 0, 1])
    with pytest.raises(ValueError):
        sims.set_cell_number([1, 1])
    with pytest.raises(ValueError):
        sims.set_cell_width([1., -1., 1.])
    with pytest.raises(ValueError):
        sims.set_timestep(0.)
    with pytest.raises(ValueError):
        sims.set_write_frequency(0)
    with pytest.raises(ValueError):
        sims.set_num_time_steps(-1)
    with pytest.raises(ValueError):
        sims.set_order(1.5)
    with pytest.raises(ValueError):
        sims.set_gravity([0., -9.81])
    with pytest.raises(ValueError):
        sims.set_output_file("")


def test_init_rejects_unknown_options():
    import pointmpm
    with pytest.raises(RuntimeError):
        pointmpm.init(arch="cpu", default_fp="float16", log=False)
    with pytest.raises(RuntimeError):
        pointmpm.init(arch="cpu", default_ip="int8", log=False)
    with pytest.raises(RuntimeError):
        pointmpm.init(arch="tpu", log=False)


def test_logger_tees_output(tmp_path, capsys):
    from pointmpm import Logger
    logger = Logger("run.log", path=str(tmp_path))
    logger.write("Time Step 1/1: 0.1 (s)\n")
    logger.flush()
    logger.log.close()
    assert "Time Step 1/1" in capsys.readouterr().out
    assert (tmp_path / "run.log").read_text(encoding="utf8") == "Time Step 1/1: 0.1 (s)\n"
