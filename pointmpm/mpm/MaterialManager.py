import warnings

from pointmpm.mpm.materials.ConstitutiveModelBase import ConstitutiveModelBase
from pointmpm.mpm.materials.MaterialKernel import kernel_count_invalid_material
from pointmpm.utils.ObjectIO import DictIO


class ConstitutiveModel(object):
    """Ordered list of stress models, indexed by the particle material ID."""
    def __init__(self) -> None:
        self.matProps = []

    def __len__(self):
        return len(self.matProps)

    def __getitem__(self, materialID):
        return self.matProps[materialID]

    def material_handle(self, constitutive_model):
        from pointmpm.mpm.materials.LinearElastic import LinearElastic
        from pointmpm.mpm.materials.NeoHookean import NeoHookean
        from pointmpm.mpm.materials.Newtonian import Newtonian
        model_type = {"LinearElastic": LinearElastic, "NeoHookean": NeoHookean, "Newtonian": Newtonian}
        if constitutive_model in model_type:
            return model_type[constitutive_model]()
        else:
            raise ValueError(f'Constitutive Model: {constitutive_model} error! Only the following is aviliable:\n{list(model_type.keys())}')

    def add_material(self, material, constitutive_model, log=True):
        materialID = int(DictIO.GetEssential(material, 'MaterialID'))
        material_struct = self.material_handle(constitutive_model)
        material_struct.check_materialID(materialID)
        material_struct.model_initialize(material)
        self.set_material(materialID, material_struct)
        if log:
            material_struct.print_message(materialID)

    def set_material(self, materialID, material_struct: ConstitutiveModelBase):
        if not isinstance(material_struct, ConstitutiveModelBase):
            raise RuntimeError(f"Material {materialID} is not a constitutive model")
        material_struct.check_materialID(materialID)
        material_struct.materialID = materialID
        if materialID >= len(self.matProps):
            self.matProps += [None] * (materialID + 1 - len(self.matProps))
        elif not self.matProps[materialID] is None:
            warnings.warn("Previous Material Property will be overwritten!")
        self.matProps[materialID] = material_struct

    def set_material_models(self, materials):
        self.matProps = []
        for materialID, material_struct in enumerate(materials):
            self.set_material(materialID, material_struct)

    def check_material_list(self):
        if len(self.matProps) == 0:
            raise RuntimeError("At least one material model should be added before running")
        missing = [materialID for materialID, material_struct in enumerate(self.matProps) if material_struct is None]
        if missing:
            raise RuntimeError(f"Material models with MaterialID {missing} are missing")

    def check_particle_material(self, particleNum, particle):
        invalid = kernel_count_invalid_material(int(particleNum), len(self.matProps), particle)
        if invalid > 0:
            raise RuntimeError(f"{invalid} particles carry a MaterialID outside [0, {len(self.matProps) - 1}]")

    def compute_stress_strain(self, particleNum, particle, dt):
        for materialID, material_struct in enumerate(self.matProps):
            material_struct.calculate_stress(particleNum, particle, materialID, dt)

    def find_max_sound_speed(self, densities):
        sound_speed = 0.
        for materialID, material_struct in enumerate(self.matProps):
            if materialID in densities:
                sound_speed = max(sound_speed, material_struct.get_sound_speed(densities[materialID]))
        return sound_speed
