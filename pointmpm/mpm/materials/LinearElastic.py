import taichi as ti

from pointmpm.mpm.materials.ConstitutiveModelBase import ConstitutiveModelBase
from pointmpm.mpm.materials.MaterialKernel import trace, symmetric_part
from pointmpm.utils.constants import DELTA
from pointmpm.utils.ObjectIO import DictIO


@ti.dataclass
class LinearElasticModel:
    young: float
    possion: float
    shear: float
    lambda_: float

    @ti.func
    def ComputeStress(self, deformation_gradient, velocity_gradient, dt):
        strain = symmetric_part(deformation_gradient) - DELTA
        return self.lambda_ * trace(strain) * DELTA + 2. * self.shear * strain


class LinearElastic(ConstitutiveModelBase):
    """Small strain isotropic elasticity measured from the total deformation gradient."""
    name = "LinearElastic"

    def __init__(self) -> None:
        super().__init__()
        self.add_material(LinearElasticModel)
        self.young = 0.
        self.possion = 0.

    def model_initialize(self, material):
        materialID = DictIO.GetAlternative(material, 'MaterialID', self.materialID)
        young = DictIO.GetEssential(material, 'YoungModulus')
        possion = DictIO.GetAlternative(material, 'PossionRatio', 0.3)
        if young <= 0.:
            raise ValueError(f"Young modulus {young} should be larger than 0")
        if possion <= -1. or possion >= 0.5:
            raise ValueError(f"Possion ratio {possion} should be in (-1, 0.5)")

        self.materialID = materialID
        self.young, self.possion = float(young), float(possion)
        shear, lambda_ = self.lame_parameters(self.young, self.possion)
        self.matProps.young[0] = self.young
        self.matProps.possion[0] = self.possion
        self.matProps.shear[0] = shear
        self.matProps.lambda_[0] = lambda_

    def get_sound_speed(self, density):
        return self.elastic_wave_speed(self.young, self.possion, density)
        
    def print_message(self, materialID):
        print(" Constitutive Model Information ".center(71, '-'))
        print('Constitutive model: Linear Elastic')
        print("Model ID: ", materialID)
        print('Young Modulus: ', self.young)
        print('Possion Ratio: ', self.possion, '\n')
