import logging
import numpy as np
import matplotlib.pyplot as plt

from spin_anneal import Simulation, create_schedule, run_annealing
from spin_anneal.io import create_output_directory, save_configuration, save_trace, save_simulation
from spin_anneal.visualization import LatticeVisualizer



# ==========================================================
config = {"lattice": {"width": 10, "height": 10},
          "seed": 42,
          "parameters": {"pairing_energy": -1.0,    # negative -> aligned neighbors favored
                         "external_field": 0.05},   # positive -> UP favored
          "schedule": {"type": "linear",            # T(i) = 1001 - i/10
                       "initial": 1001.0,
                       "rate": 0.1},
          "run": {"n_steps": 10000,
                  "start_step": 1,
                  "record_every": 100,
                  "skip_first_cell": True}}

do_save_results = True
do_plot_summary = True
log_level = logging.INFO
# ==========================================================

logging.basicConfig(level=log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")


"""
Build simulation
"""
sim = Simulation.create(width=config["lattice"]["width"],
                        height=config["lattice"]["height"],
                        seed=config["seed"],
                        skip_first_cell=config["run"]["skip_first_cell"])
sim.set_pairing_energy(config["parameters"]["pairing_energy"])
sim.set_external_field(config["parameters"]["external_field"])

print(f"[Init] {sim}")
print(f"[Init] energy = {sim.energy():.4f}, magnetization = {sim.lattice.magnetization():+.3f}")


"""
Anneal
"""
schedule = create_schedule(config["schedule"])
trace = run_annealing(sim,
                      schedule,
                      n_steps=config["run"]["n_steps"],
                      record_every=config["run"]["record_every"],
                      start_step=config["run"]["start_step"],
                      progress=True)

print(f"[Done] final energy = {trace.final_energy:.4f}")
print(f"[Done] magnetization = {sim.lattice.magnetization():+.3f}")
print(f"[Done] acceptance ratio = {trace.acceptance_ratio:.3f}")

# energy printed every 100 steps, as the classic driver did
for step, energy in zip(trace.steps[::100], trace.energies[::100]):
    print(f"step {step:6d}  T = {schedule(int(step)):9.3f}  E = {energy:9.3f}")


if do_save_results:
    output_dir = create_output_directory("annealing")
    save_configuration(output_dir, config)
    save_trace(output_dir, trace)
    save_simulation(output_dir, sim)
    print(f"[Save] results written to {output_dir}")


if do_plot_summary:
    fig = LatticeVisualizer.plot_summary(trace, sim.width, sim.height,
                                         title="Simulated annealing of a 2D spin lattice")
    if do_save_results:
        fig.savefig(output_dir / 'summary.png', bbox_inches='tight', dpi=300)
    plt.show()

    final_grid = LatticeVisualizer.state_to_grid(sim.export_state(), sim.width, sim.height)
    print(f"[State] UP cells: {int(np.sum(final_grid == 1))} / {final_grid.size}")
