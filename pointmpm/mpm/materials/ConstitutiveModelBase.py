import numpy as np

from pointmpm.mpm.materials.MaterialKernel import kernel_compute_stress_strain


class ConstitutiveModelBase(object):
    """A stress model shared by every particle that carries its material ID.

    ``matProps`` is a one-entry Taichi struct field holding the model parameters.
    """
    name = None

    def __init__(self) -> None:
        self.matProps = None
        self.materialID = -1

    def add_material(self, material_struct):
        self.matProps = material_struct.field(shape=1)

    def check_materialID(self, materialID):
        if materialID < 0: 
            raise RuntimeError(f"MaterialID {materialID} should not be less than 0")

    def model_initialize(self, material):
        raise NotImplementedError
    
    def get_sound_speed(self, density):
        raise NotImplementedError
    
    def print_message(self, materialID):
        raise NotImplementedError
    
    def calculate_stress(self, particleNum, particle, materialID, dt):
        kernel_compute_stress_strain(int(particleNum), int(materialID), float(dt), particle, self.matProps)

    def lame_parameters(self, young, possion):
        shear = 0.5 * young / (1. + possion)
        lambda_ = young * possion / ((1. + possion) * (1. - 2. * possion))
        return shear, lambda_

    def elastic_wave_speed(self, young, possion, density):
        if density <= 0.:
            return 0.
        return float(np.sqrt(young * (1. - possion) / (1. + possion) / (1. - 2. * possion) / density))
