import numpy as np
import taichi as ti

from pointmpm.mpm.elements.ElementBase import ElementBase
from pointmpm.mpm.elements.HexahedronKernel import kernel_locate_particles
from pointmpm.utils.TypeDefination import vec3f, vec3i


FACE_NAME = ["-x", "+x", "-y", "+y", "-z", "+z"]


class HexahedronElement8Nodes(ElementBase):
    """Uniform structured mesh of trilinear hexahedral cells.

    Nodes are numbered ``i + j * gx + k * gx * gy`` and cells ``i + j * nx + k * nx * ny``.
    Inside a cell the local node ``n = a + 2b + 4c`` is the node at offset ``(a, b, c)``.
    Reference coordinates span ``[-1, 1]`` along each axis.
    """
    def __init__(self) -> None:
        super().__init__("R8N3D")
        self.origin = np.zeros(3)
        self.grid_size = np.ones(3)
        self.igrid_size = np.ones(3)
        self.cnum = np.zeros(3, dtype=np.int32)
        self.gnum = np.ones(3, dtype=np.int32)
        self.cell_volume = 0.

    def create_nodes(self, cell_number, cell_width, origin=(0., 0., 0.)):
        cell_number = np.array(cell_number, dtype=np.int32).reshape(-1)
        cell_width = np.array(cell_width, dtype=np.float64).reshape(-1)
        if cell_number.shape[0] != 3:
            raise ValueError("Keyword:: /cell_number/ should contain three components")
        if cell_width.shape[0] == 1:
            cell_width = np.repeat(cell_width, 3)
        if np.any(cell_number <= 0):
            raise ValueError(f"Cell number {cell_number.tolist()} should be positive in every direction")
        if np.any(cell_width <= 0.):
            raise ValueError(f"Cell width {cell_width.tolist()} should be positive in every direction")

        self.origin = np.array(origin, dtype=np.float64).reshape(3)
        self.grid_size = cell_width
        self.igrid_size = 1. / self.grid_size
        self.cnum = cell_number
        self.gnum = self.cnum + 1
        self.cellSum = int(self.cnum[0] * self.cnum[1] * self.cnum[2])
        self.gridSum = int(self.gnum[0] * self.gnum[1] * self.gnum[2])
        self.cell_volume = self.calc_volume()
        self.set_boundary_nodes()

    def calc_volume(self):
        return float(self.grid_size[0] * self.grid_size[1] * self.grid_size[2])

    def particles_per_cell(self, order):
        if int(order) < 1:
            raise ValueError(f"Particle order {order} should be larger than 0")
        return int(order) ** 3

    def nodes_per_cell(self):
        return 8

    def spatial_dimension(self):
        return 3

    def cell_index(self, cell_ids):
        cell_ids = np.asarray(cell_ids, dtype=np.int64)
        return np.stack([cell_ids % self.cnum[0],
                         (cell_ids // self.cnum[0]) % self.cnum[1],
                         cell_ids // (self.cnum[0] * self.cnum[1])], axis=-1)

    def reference_candidates(self, order):
        ppc = self.particles_per_cell(order)
        local_coord = -1. + (2. * np.arange(order) + 1.) / order
        zcoord, ycoord, xcoord = np.meshgrid(local_coord, local_coord, local_coord, indexing='ij')
        return np.stack([xcoord.ravel(), ycoord.ravel(), zcoord.ravel()], axis=1).reshape(ppc, 3)

    def initialize_particles(self, cell_ids, order):
        """Candidate particles of the given cells, ``order ** 3`` per cell.

        Candidates sit at the centres of a regular ``order x order x order`` subdivision
        of each cell and share the cell volume evenly. Output is ordered by cell, then by
        candidate with x varying fastest.
        """
        ppc = self.particles_per_cell(order)
        offset = 0.5 * (self.reference_candidates(order) + 1.) * self.grid_size
        corner = self.origin + self.cell_index(cell_ids) * self.grid_size
        positions = (corner[:, np.newaxis, :] + offset[np.newaxis, :, :]).reshape(-1, 3)
        volumes = np.full(positions.shape[0], self.cell_volume / ppc)
        return positions, volumes

    def get_boundary_nodes(self, face):
        if face < 0 or face > 5:
            raise ValueError(f"Face index {face} should be in [0, 5]")
        axis, side = face // 2, face % 2
        inodes = np.arange(self.gridSum, dtype=np.int32)
        index = (inodes // np.array([1, self.gnum[0], self.gnum[0] * self.gnum[1]])[axis]) % self.gnum[axis]
        return inodes[index == (0 if side == 0 else self.gnum[axis] - 1)]

    def set_boundary_nodes(self):
        self.boundary_nodes = []
        for face in range(6):
            inodes = self.get_boundary_nodes(face)
            face_nodes = ti.field(int, shape=inodes.shape[0])
            face_nodes.from_numpy(inodes)
            self.boundary_nodes.append(face_nodes)

    def calc_critical_timestep(self, sound_speed):
        if sound_speed <= 0.:
            return np.inf
        return float(np.min(self.grid_size)) / sound_speed

    def locate_particles(self, particleNum, particle):
        kernel_locate_particles(particleNum, vec3f(self.origin), vec3f(self.grid_size), vec3f(self.igrid_size), vec3i(self.cnum), vec3i(self.gnum), particle)

    # host-side evaluation of the same cell mapping, used while setting up and checking
    def locate_particle(self, position):
        index = np.floor((np.asarray(position) - self.origin) * self.igrid_size).astype(np.int64)
        return np.clip(index, 0, self.cnum - 1)

    def cell_node_ids(self, cell):
        cell = np.asarray(cell, dtype=np.int64)
        offsets = np.array([[n & 1, (n >> 1) & 1, (n >> 2) & 1] for n in range(8)])
        nodes = cell[..., np.newaxis, :] + offsets
        return nodes[..., 0] + nodes[..., 1] * self.gnum[0] + nodes[..., 2] * self.gnum[0] * self.gnum[1]

    def map_physical_to_reference_frame(self, position, cell):
        return 2. * (np.asarray(position) - self.origin - np.asarray(cell) * self.grid_size) * self.igrid_size - 1.

    def shape_function_value(self, local_coord):
        local_coord = np.asarray(local_coord, dtype=np.float64)
        signs = np.array([[2 * (n & 1) - 1, 2 * ((n >> 1) & 1) - 1, 2 * ((n >> 2) & 1) - 1] for n in range(8)], dtype=np.float64)
        return 0.125 * np.prod(1. + signs * local_coord[..., np.newaxis, :], axis=-1)

    def shape_function_gradient(self, local_coord):
        local_coord = np.asarray(local_coord, dtype=np.float64)
        signs = np.array([[2 * (n & 1) - 1, 2 * ((n >> 1) & 1) - 1, 2 * ((n >> 2) & 1) - 1] for n in range(8)], dtype=np.float64)
        weight = 1. + signs * local_coord[..., np.newaxis, :]
        gradient = np.empty(weight.shape)
        for d in range(3):
            others = [e for e in range(3) if e != d]
            gradient[..., d] = 0.25 * signs[:, d] * weight[..., others[0]] * weight[..., others[1]] * self.igrid_size[d]
        return gradient
