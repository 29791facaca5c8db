import numpy as np

from pointmpm.mpm.elements.ElementBase import ElementBase
from pointmpm.mpm.generator.Geometry import Geometry, GeometryFactory
from pointmpm.mpm.generator.ParticleBatch import ParticleBatch


class GenerateManager(object):
    def __init__(self, chunk_size=65536):
        self.myGeometry = []
        self.chunk_size = int(chunk_size)

    def add_geometry(self, geometry, log=True):
        if not isinstance(geometry, Geometry):
            geometry = GeometryFactory(geometry)
        self.myGeometry.append(geometry)
        if log:
            geometry.print_message()

    def initialize(self, element: ElementBase, order, geometries=None):
        """Seed particles cell by cell.

        Each cell yields ``element.particles_per_cell(order)`` candidates. A candidate belongs
        to the first geometry, in insertion order, that contains it. Unclaimed candidates are
        dropped. The result keeps cell order, then candidate order inside each cell.
        """
        if geometries is None:
            geometries = self.myGeometry
        else:
            if isinstance(geometries, (dict, Geometry)):
                geometries = [geometries]
            geometries = [geometry if isinstance(geometry, Geometry) else GeometryFactory(geometry) for geometry in geometries]
        if len(geometries) == 0:
            raise RuntimeError("At least one geometry should be added before generating particles")

        ppc = element.particles_per_cell(order)
        cells_per_chunk = max(1, self.chunk_size // ppc)
        batches = []
        for start_cell in range(0, element.total_num_cells(), cells_per_chunk):
            cell_ids = np.arange(start_cell, min(start_cell + cells_per_chunk, element.total_num_cells()))
            batch = ParticleBatch(*element.initialize_particles(cell_ids, order))
            owner = np.full(len(batch), -1, dtype=np.int32)
            for geometryID, geometry in enumerate(geometries):
                claimed = (owner < 0) & geometry.particle_in_geometry(batch.position)
                owner[claimed] = geometryID
                geometry.initialize_particles(batch, claimed)
            batches.append(batch.select(owner >= 0))

        particles = ParticleBatch.concatenate(batches)
        if len(particles) == 0:
            raise RuntimeError("No particle is generated, please check the geometries lie inside the mesh")
        return particles
