import numpy as np
import taichi as ti

from pointmpm.mpm.materials.ConstitutiveModelBase import ConstitutiveModelBase
from pointmpm.mpm.materials.MaterialKernel import trace, symmetric_part
from pointmpm.utils.constants import DELTA
from pointmpm.utils.ObjectIO import DictIO


@ti.dataclass
class NewtonianModel:
    viscosity: float
    bulk: float

    @ti.func
    def ComputeStress(self, deformation_gradient, velocity_gradient, dt):
        pressure = self.bulk * (1. - deformation_gradient.determinant())
        strain_rate = symmetric_part(velocity_gradient)
        deviatoric_strain_rate = strain_rate - trace(strain_rate) / 3. * DELTA
        return -pressure * DELTA + 2. * self.viscosity * deviatoric_strain_rate


class Newtonian(ConstitutiveModelBase):
    name = "Newtonian"

    def __init__(self) -> None:
        super().__init__()
        self.add_material(NewtonianModel)
        self.viscosity = 0.
        self.bulk = 0.

    def model_initialize(self, material):
        materialID = DictIO.GetAlternative(material, 'MaterialID', self.materialID)
        bulk = DictIO.GetAlternative(material, 'BulkModulus', 3.6e5)
        viscosity = DictIO.GetAlternative(material, 'Viscosity', 1e-3)
        if bulk <= 0.:
            raise ValueError(f"Bulk modulus {bulk} should be larger than 0")
        if viscosity < 0.:
            raise ValueError(f"Viscosity {viscosity} should not be negative")

        self.materialID = materialID
        self.bulk, self.viscosity = float(bulk), float(viscosity)
        self.matProps.bulk[0] = self.bulk
        self.matProps.viscosity[0] = self.viscosity

    def get_sound_speed(self, density):
        if density <= 0.:
            return 0.
        return float(np.sqrt(self.bulk / density))
        
    def print_message(self, materialID):
        print(" Constitutive Model Information ".center(71, '-'))
        print('Constitutive model: Newtonian')
        print("Model ID: ", materialID)
        print('Bulk Modulus: ', self.bulk)
        print('Viscosity: ', self.viscosity, '\n')
