import os

import numpy as np

from pointmpm.utils.constants import GRAVITY


class Simulation(object):
    def __init__(self) -> None:
        self.cell_number = [1, 1, 1]
        self.cell_width = [1., 1., 1.]
        self.origin = [0., 0., 0.]
        self.gravity = np.array([0., 0., -GRAVITY])
        self.has_gravity = True
        self.order = 1

        self.delta = 0.
        self.num_time_steps = 0
        self.write_frequency = 1
        self.CFL = 0.5
        self.output_file = None

        self.current_time = 0.
        self.current_step = 0
        self.current_print = 0

    def set_cell_number(self, cell_number):
        cell_number = np.array(cell_number, dtype=np.int64).reshape(-1)
        if cell_number.shape[0] != 3:
            raise ValueError("Keyword:: /cell_number/ should contain three components")
        if np.any(cell_number <= 0):
            raise ValueError(f"Keyword:: /cell_number/ {cell_number.tolist()} should be positive")
        self.cell_number = cell_number.tolist()

    def set_cell_width(self, cell_width):
        cell_width = np.array(cell_width, dtype=np.float64).reshape(-1)
        if cell_width.shape[0] == 1:
            cell_width = np.repeat(cell_width, 3)
        if cell_width.shape[0] != 3:
            raise ValueError("Keyword:: /cell_width/ should be a scalar or contain three components")
        if np.any(cell_width <= 0.):
            raise ValueError(f"Keyword:: /cell_width/ {cell_width.tolist()} should be positive")
        self.cell_width = cell_width.tolist()

    def set_origin(self, origin):
        origin = np.array(origin, dtype=np.float64).reshape(-1)
        if origin.shape[0] != 3:
            raise ValueError("Keyword:: /origin/ should contain three components")
        self.origin = origin.tolist()

    def set_gravity(self, gravity):
        gravity = np.array(gravity, dtype=np.float64).reshape(-1)
        if gravity.shape[0] != 3:
            raise ValueError("Keyword:: /gravity/ should contain three components")
        self.gravity = gravity

    def set_has_gravity(self, has_gravity):
        self.has_gravity = bool(has_gravity)

    def get_gravity(self):
        if self.has_gravity:
            return self.gravity
        return np.zeros(3)

    def set_order(self, order):
        if int(order) != order or int(order) < 1:
            raise ValueError(f"Keyword:: /order/ {order} should be a positive integer")
        self.order = int(order)

    def set_timestep(self, timestep):
        if timestep <= 0.:
            raise ValueError(f"Keyword:: /Timestep/ {timestep} should be larger than 0")
        self.delta = float(timestep)

    def set_num_time_steps(self, num_time_steps):
        if int(num_time_steps) < 0:
            raise ValueError(f"Keyword:: /NumTimeSteps/ {num_time_steps} should not be negative")
        self.num_time_steps = int(num_time_steps)

    def set_write_frequency(self, write_frequency):
        if int(write_frequency) < 1:
            raise ValueError(f"Keyword:: /WriteFrequency/ {write_frequency} should be larger than 0")
        self.write_frequency = int(write_frequency)

    def set_CFL(self, CFL):
        if CFL <= 0.:
            raise ValueError(f"Keyword:: /CFL/ {CFL} should be larger than 0")
        self.CFL = float(CFL)

    def set_output_file(self, output_file):
        if not isinstance(output_file, str) or output_file == "":
            raise ValueError("Keyword:: /OutputFile/ should be a non-empty string")
        self.output_file = output_file

    def get_output_directory(self):
        return os.path.dirname(self.output_file)

    def get_simulation_time(self):
        return self.delta * self.num_time_steps

    def reset_clock(self):
        self.current_time = 0.
        self.current_step = 0
        self.current_print = 0
