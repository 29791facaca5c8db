import os

import numpy as np

from pointmpm.mpm.SceneManager import myScene
from pointmpm.mpm.Simulation import Simulation


class WriteFile:
    """Plain-text particle snapshots named ``<output_file>.csv.<index>``.

    Each row holds the particle position and velocity magnitude separated by ``", "``.
    """
    header = "x, y, z, velocity magnitude"

    def __init__(self, sims: Simulation):
        self.output_file = sims.output_file
        self.mkdir(sims)

    def mkdir(self, sims: Simulation):
        path = sims.get_output_directory()
        if path != "" and not os.path.exists(path):
            os.makedirs(path)

    def output(self, sims: Simulation, scene: myScene):
        self.write_time_step(self.output_file, sims.current_print, scene.particle.x.to_numpy(), scene.particle.v.to_numpy())

    @classmethod
    def write_time_step(cls, output_file, step, position, velocity):
        position = np.asarray(position).reshape(-1, 3)
        velocity_magnitude = np.linalg.norm(np.asarray(velocity).reshape(-1, 3), axis=1)
        filename = f"{output_file}.csv.{step}"
        np.savetxt(filename, np.column_stack((position, velocity_magnitude)), fmt='%g', delimiter=', ', header=cls.header, comments='')
        return filename
