import numpy as np

from pointmpm.mpm.boundaries.BoundaryConstraint import BoundaryFactory
from pointmpm.mpm.elements.HexahedronElement8Nodes import HexahedronElement8Nodes
from pointmpm.mpm.generator.InsertionKernel import kernel_add_particles
from pointmpm.mpm.generator.ParticleBatch import ParticleBatch
from pointmpm.mpm.MaterialManager import ConstitutiveModel
from pointmpm.mpm.Simulation import Simulation
from pointmpm.mpm.structs import MaterialPoint, NodeFields


class myScene(object):
    """Owner of the particle field, the nodal buffers, the mesh and the operator lists."""
    def __init__(self) -> None:
        self.element = None
        self.node = None
        self.particle = None
        self.particleNum = 0
        self.material = ConstitutiveModel()
        self.boundary = None

    def activate_element(self, sims: Simulation):
        if not self.element is None:
            print("Warning: Previous elements will be override!")
        self.element = HexahedronElement8Nodes()
        self.element.create_nodes(sims.cell_number, sims.cell_width, sims.origin)
        self.node = NodeFields(self.element.total_num_nodes())

    def set_boundary_conditions(self, boundaries):
        boundaries = list(boundaries)
        if len(boundaries) != 6:
            raise RuntimeError(f"Exactly 6 boundary conditions (-x, +x, -y, +y, -z, +z) are required, got {len(boundaries)}")
        self.boundary = [BoundaryFactory(boundary) for boundary in boundaries]

    def add_particles(self, batch: ParticleBatch):
        if len(batch) == 0:
            raise RuntimeError("No particle is generated, please check the geometries lie inside the mesh")
        if not self.particle is None:
            print("Warning: Previous particles will be override!")
        self.particleNum = len(batch)
        self.particle = MaterialPoint.field(shape=self.particleNum)
        kernel_add_particles(self.particleNum, self.particle, 
                             np.ascontiguousarray(batch.materialID, dtype=np.int32), 
                             np.ascontiguousarray(batch.mass, dtype=np.float64), 
                             np.ascontiguousarray(batch.volume, dtype=np.float64), 
                             np.ascontiguousarray(batch.position, dtype=np.float64), 
                             np.ascontiguousarray(batch.velocity, dtype=np.float64))

    def check_configuration(self):
        if self.element is None:
            raise RuntimeError("The mesh should be created first")
        if self.boundary is None:
            raise RuntimeError("Boundary conditions of the six faces should be set first")
        if self.particle is None or self.particleNum == 0:
            raise RuntimeError("Particles should be generated first")
        self.material.check_material_list()
        self.material.check_particle_material(self.particleNum, self.particle)

    def get_material_density(self):
        materialID = self.particle.materialID.to_numpy()
        density = self.particle.m.to_numpy() / self.particle.vol.to_numpy()
        return {int(matID): float(np.min(density[materialID == matID])) for matID in np.unique(materialID)}

    def get_particle_data(self):
        return {"position": self.particle.x.to_numpy(),
                "velocity": self.particle.v.to_numpy(),
                "mass": self.particle.m.to_numpy(),
                "volume": self.particle.vol.to_numpy(),
                "materialID": self.particle.materialID.to_numpy(),
                "deformation_gradient": self.particle.deformation_gradient.to_numpy(),
                "velocity_gradient": self.particle.velocity_gradient.to_numpy(),
                "stress": self.particle.stress.to_numpy()}

    def print_boundary_message(self):
        print(" Boundary Condition ".center(71, '-'))
        for face, boundary in enumerate(self.boundary):
            boundary.print_message(face)
        print('\n')

    def print_particle_message(self):
        print(" Particle Information ".center(71, '-'))
        print(("Total particle number: " + str(self.particleNum)).ljust(67))
        print(("Total particle mass: " + str(float(np.sum(self.particle.m.to_numpy())))).ljust(67), '\n')
