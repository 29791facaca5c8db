from pointmpm.mpm.structs.Particle import MaterialPoint
from pointmpm.mpm.structs.GridNode import NodeFields
