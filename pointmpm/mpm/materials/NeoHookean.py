import taichi as ti

from pointmpm.mpm.materials.ConstitutiveModelBase import ConstitutiveModelBase
from pointmpm.utils.constants import DELTA
from pointmpm.utils.ObjectIO import DictIO


@ti.dataclass
class NeoHookeanModel:
    young: float
    possion: float
    shear: float
    lambda_: float

    @ti.func
    def ComputeStress(self, deformation_gradient, velocity_gradient, dt):
        jacobian = deformation_gradient.determinant()
        left_cauchy_green = deformation_gradient @ deformation_gradient.transpose()
        return (self.shear * (left_cauchy_green - DELTA) + self.lambda_ * ti.log(jacobian) * DELTA) / jacobian


class NeoHookean(ConstitutiveModelBase):
    """Compressible Neo-Hookean hyperelasticity, Cauchy stress from the deformation gradient."""
    name = "NeoHookean"

    def __init__(self) -> None:
        super().__init__()
        self.add_material(NeoHookeanModel)
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
        print('Constitutive model: Neo-Hookean')
        print("Model ID: ", materialID)
        print('Young Modulus: ', self.young)
        print('Possion Ratio: ', self.possion, '\n')
