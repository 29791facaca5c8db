from pointmpm.mpm.boundaries.BoundaryCore import *
from pointmpm.mpm.elements.HexahedronElement8Nodes import FACE_NAME


class BoundaryCondition(object):
    """Operator applied to the nodes lying on one face of the mesh.

    Faces are numbered -x, +x, -y, +y, -z, +z. Both conditions modify the nodal field in place.
    """
    name = None

    def evaluate_momentum_condition(self, element, face, node_m, node_momentum):
        raise NotImplementedError

    def evaluate_impulse_condition(self, element, face, node_m, node_impulse):
        raise NotImplementedError

    def print_message(self, face):
        print(("Face " + FACE_NAME[face] + ": " + str(self.name)).ljust(67))


class FreeBoundary(BoundaryCondition):
    name = "Free"

    def evaluate_momentum_condition(self, element, face, node_m, node_momentum):
        pass

    def evaluate_impulse_condition(self, element, face, node_m, node_impulse):
        pass


class NoSlipBoundary(BoundaryCondition):
    name = "NoSlip"

    def evaluate_momentum_condition(self, element, face, node_m, node_momentum):
        kernel_fix_nodal_vector(element.boundary_nodes[face], node_momentum)

    def evaluate_impulse_condition(self, element, face, node_m, node_impulse):
        kernel_fix_nodal_vector(element.boundary_nodes[face], node_impulse)


class FreeSlipBoundary(BoundaryCondition):
    name = "FreeSlip"

    def evaluate_momentum_condition(self, element, face, node_m, node_momentum):
        kernel_fix_nodal_component(element.boundary_nodes[face], face // 2, node_momentum)

    def evaluate_impulse_condition(self, element, face, node_m, node_impulse):
        kernel_fix_nodal_component(element.boundary_nodes[face], face // 2, node_impulse)


def BoundaryFactory(boundary_type):
    if isinstance(boundary_type, BoundaryCondition):
        return boundary_type
    
    valid_list = {"Free": FreeBoundary, "None": FreeBoundary, "NoSlip": NoSlipBoundary, "FreeSlip": FreeSlipBoundary}
    if boundary_type is None:
        return FreeBoundary()
    elif boundary_type in valid_list:
        return valid_list[boundary_type]()
    else:
        raise RuntimeError(f"Boundary condition {boundary_type} is not supported! Only the following is aviliable: {list(valid_list.keys())}")
