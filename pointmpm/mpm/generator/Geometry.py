import numpy as np

from pointmpm.utils.ObjectIO import DictIO


class Geometry(object):
    """Region that claims candidate particles and assigns their initial state.

    A claimed particle gets mass ``density * volume``, the initial velocity and the material ID.
    """
    name = None

    def __init__(self, materialID=0, density=1000., init_v=(0., 0., 0.)) -> None:
        if int(materialID) < 0:
            raise RuntimeError(f"MaterialID {materialID} should not be less than 0")
        if density <= 0.:
            raise ValueError(f"Density {density} should be larger than 0")
        self.materialID = int(materialID)
        self.density = float(density)
        self.init_v = np.array(init_v, dtype=np.float64).reshape(3)

    def particle_in_geometry(self, position):
        raise NotImplementedError

    def initialize_particles(self, batch, mask):
        batch.mass[mask] = self.density * batch.volume[mask]
        batch.velocity[mask] = self.init_v
        batch.materialID[mask] = self.materialID

    def print_message(self):
        raise NotImplementedError


class Sphere(Geometry):
    name = "Sphere"

    def __init__(self, center, radius, materialID=0, density=1000., init_v=(0., 0., 0.)) -> None:
        super().__init__(materialID, density, init_v)
        if radius <= 0.:
            raise ValueError(f"Sphere radius {radius} should be larger than 0")
        self.center = np.array(center, dtype=np.float64).reshape(3)
        self.radius = float(radius)

    def particle_in_geometry(self, position):
        relative = np.asarray(position).reshape(-1, 3) - self.center
        return np.sum(relative * relative, axis=1) <= self.radius * self.radius

    def print_message(self):
        print(" Geometry Information ".center(71, '-'))
        print(("Geometry Type: " + self.name).ljust(67))
        print(("Center: " + str(self.center.tolist())).ljust(67))
        print(("Radius: " + str(self.radius)).ljust(67))
        print(("MaterialID: " + str(self.materialID)).ljust(67))
        print(("Density: " + str(self.density)).ljust(67))
        print(("Initial Velocity: " + str(self.init_v.tolist())).ljust(67), '\n')


class Box(Geometry):
    name = "Box"

    def __init__(self, bounds, materialID=0, density=1000., init_v=(0., 0., 0.)) -> None:
        super().__init__(materialID, density, init_v)
        bounds = np.array(bounds, dtype=np.float64).reshape(3, 2)
        if np.any(bounds[:, 1] < bounds[:, 0]):
            raise ValueError(f"Box bounds {bounds.ravel().tolist()} should be ordered as (-x, +x, -y, +y, -z, +z)")
        self.lower = bounds[:, 0]
        self.upper = bounds[:, 1]

    def particle_in_geometry(self, position):
        position = np.asarray(position).reshape(-1, 3)
        return np.all((position >= self.lower) & (position <= self.upper), axis=1)

    def print_message(self):
        print(" Geometry Information ".center(71, '-'))
        print(("Geometry Type: " + self.name).ljust(67))
        print(("Lower Bound: " + str(self.lower.tolist())).ljust(67))
        print(("Upper Bound: " + str(self.upper.tolist())).ljust(67))
        print(("MaterialID: " + str(self.materialID)).ljust(67))
        print(("Density: " + str(self.density)).ljust(67))
        print(("Initial Velocity: " + str(self.init_v.tolist())).ljust(67), '\n')


def GeometryFactory(geometry_dict):
    geometry_type = DictIO.GetEssential(geometry_dict, "Type")
    materialID = DictIO.GetAlternative(geometry_dict, "MaterialID", 0)
    density = DictIO.GetEssential(geometry_dict, "Density")
    init_v = DictIO.GetAlternative(geometry_dict, "InitialVelocity", [0., 0., 0.])
    if geometry_type == "Sphere":
        return Sphere(DictIO.GetEssential(geometry_dict, "Center"), DictIO.GetEssential(geometry_dict, "Radius"), materialID, density, init_v)
    elif geometry_type == "Box":
        bounds = DictIO.GetOptional(geometry_dict, "Bounds")
        if bounds is None:
            start_point = np.array(DictIO.GetEssential(geometry_dict, "BoundingBoxPoint"), dtype=np.float64)
            end_point = start_point + np.array(DictIO.GetEssential(geometry_dict, "BoundingBoxSize"), dtype=np.float64)
            bounds = np.stack([start_point, end_point], axis=1).ravel()
        return Box(bounds, materialID, density, init_v)
    else:
        raise RuntimeError(f"Geometry type {geometry_type} is not supported! Only the following is aviliable: ['Sphere', 'Box']")
