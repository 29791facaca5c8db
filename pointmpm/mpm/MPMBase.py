import time

from pointmpm.mpm.engines.ExplicitEngine import ExplicitEngine
from pointmpm.mpm.Recorder import WriteFile
from pointmpm.mpm.SceneManager import myScene
from pointmpm.mpm.Simulation import Simulation


class Solver:
    sims: Simulation
    engine: ExplicitEngine
    recorder: WriteFile

    def __init__(self, sims, engine, recorder):
        self.sims = sims
        self.engine = engine
        self.recorder = recorder
        self.postprocess = []

    def set_callback_function(self, functions):
        if not functions is None:
            if isinstance(functions, (list, tuple)):
                self.postprocess.extend(functions)
            elif isinstance(functions, dict):
                self.postprocess.extend(functions.values())
            elif callable(functions):
                self.postprocess.append(functions)

    def save_file(self, scene: myScene):
        self.recorder.output(self.sims, scene)

    def is_write_step(self, step):
        return (step + 1) % self.sims.write_frequency == 0

    def Solver(self, scene: myScene):
        """Write the initial state, advance ``num_time_steps`` steps and write the final state.

        A snapshot is written every ``write_frequency`` steps. The final snapshot takes the
        index after the last periodic one, so it may repeat the last periodic content.
        """
        print("#", " Start Simulation ".center(67,"="), "#")
        self.engine.pre_calculation(self.sims, scene)

        self.sims.reset_clock()
        self.save_file(scene)

        start_time = time.time()
        for step in range(self.sims.num_time_steps):
            self.sims.current_time += self.sims.delta
            self.sims.current_step = step + 1
            if self.is_write_step(step):
                print(f"Time Step {step + 1}/{self.sims.num_time_steps}: {self.sims.current_time:g} (s)")

            self.core(scene)

            if self.is_write_step(step):
                self.sims.current_print += 1
                self.save_file(scene)
        end_time = time.time()

        self.sims.current_print += 1
        self.save_file(scene)

        print('Physical time = ', end_time - start_time)
        print("#", " End Simulation ".center(67,"="), "#", '\n')

    def core(self, scene: myScene):
        self.engine.compute(self.sims, scene)
        for functions in self.postprocess:
            functions(self.sims, scene)
