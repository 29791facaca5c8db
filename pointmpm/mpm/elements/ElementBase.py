class ElementBase(object):
    def __init__(self, element_type) -> None:
        self.element_type = element_type
        self.gridSum = 0
        self.cellSum = 0
        self.gnum = [0, 0, 0]
        self.cnum = [0, 0, 0]
        self.boundary_nodes = []

    def create_nodes(self, *args):
        raise NotImplementedError

    def calc_volume(self):
        raise NotImplementedError

    def particles_per_cell(self, order):
        raise NotImplementedError

    def total_num_cells(self):
        return self.cellSum

    def total_num_nodes(self):
        return self.gridSum

    def nodes_per_cell(self):
        raise NotImplementedError

    def spatial_dimension(self):
        raise NotImplementedError

    def initialize_particles(self, *args):
        raise NotImplementedError

    def locate_particles(self, *args):
        raise NotImplementedError

    def get_boundary_nodes(self, *args):
        raise NotImplementedError
