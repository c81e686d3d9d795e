# Export benchmark
# ================
#
# This benchmark measures:
#
# * The performance of exporting a trace, from the raw samples to the ordered profile events
# * The memory overhead of the expanded samples kept between the stages
#
# The trace is either loaded from a folded stacks file (one `root;caller;leaf count` line per stack, as produced by
# the FlameGraph stackcollapse scripts), where each line is replayed as `count` consecutive samples, or generated
# from random call paths when no input file is given.
#
# By default this benchmark runs in the performance profiling mode; to get the memory information
# set the MEMORY_INFO environment variable to 1.
#
# How to run:
# * See `python benchmarking/export_benchmark.py --help` for options
# * `PRINT_INFO=1 MEMORY_INFO=1 INPUT_FILE=trace.folded python benchmarking/export_benchmark.py --inherit-environ INPUT_FILE`
#   prints both performance and memory info (after a default number of runs)
#
# Note: without `--inherit-environ INPUT_FILE` the worker processes spawned by pyperf do not see INPUT_FILE and
# fall back to the generated trace.
#
# Dependencies:
#
# * pyperf - https://pypi.org/project/pyperf/
# * Pympler - https://pypi.org/project/Pympler/
#

import os
import random
import sys

import pyperf
from pympler import asizeof

from speedscope_exporter.configuration import ExporterConfiguration
from speedscope_exporter.exporter import SpeedScopeExporter
from speedscope_exporter.model.stack_source import MemoryStackSource
from speedscope_exporter.sample_collector import get_sorted_samples
from speedscope_exporter.stack_walker import StackWalker

INPUT_FILE = os.environ.get("INPUT_FILE")
PRINT_INFO = os.environ.get("PRINT_INFO") == "1"
MEMORY_INFO = os.environ.get("MEMORY_INFO") == "1"
SAMPLES_INJECTED_CAP = 125000
SAMPLING_INTERVAL_MS = 1.0
GENERATED_STACK_DEPTH = 40


def load_folded_stacks(input_file, samples_injected_cap):
    stack_source = MemoryStackSource()
    tick = 0
    with open(input_file) as lines:
        for line in lines:
            stack, _, count = line.rstrip().rpartition(" ")
            if not stack:
                continue
            names = stack.split(";")
            for _ in range(int(count)):
                stack_source.add_stack(names, relative_time=tick * SAMPLING_INTERVAL_MS, metric=SAMPLING_INTERVAL_MS)
                tick += 1
                if samples_injected_cap and tick >= samples_injected_cap:
                    return stack_source
    return stack_source


def generate_stacks(samples_injected_cap):
    rng = random.Random(42)
    functions = ["function_" + str(i) for i in range(200)]
    stack_source = MemoryStackSource()
    tick = 0
    while tick < samples_injected_cap:
        names = ["main"] + [rng.choice(functions) for _ in range(rng.randint(1, GENERATED_STACK_DEPTH))]
        for _ in range(rng.randint(1, 20)):
            stack_source.add_stack(names, relative_time=tick * SAMPLING_INTERVAL_MS, metric=SAMPLING_INTERVAL_MS)
            tick += 1
    return stack_source


def load_stack_source(samples_injected_cap=SAMPLES_INJECTED_CAP):
    if INPUT_FILE:
        return load_folded_stacks(INPUT_FILE, samples_injected_cap)
    return generate_stacks(samples_injected_cap or SAMPLES_INJECTED_CAP)


def export(stack_source):
    return SpeedScopeExporter(environment={"configuration": ExporterConfiguration()}).export(stack_source)


def print_stats_for(stack_source):
    sorted_samples = get_sorted_samples(stack_source)
    _, frame_id_to_samples = StackWalker(stack_source).walk_the_stack_and_expand_samples(sorted_samples)
    expanded_samples_count = sum(len(samples) for samples in frame_id_to_samples.values())
    print("Number of samples: " + str(len(sorted_samples)))
    print("Number of expanded samples: " + str(expanded_samples_count))
    maximum_object_graph_depth_for_measurement = 2**32
    print("Expanded samples size (bytes): "
          + str(asizeof.asizeof(frame_id_to_samples, limit=maximum_object_graph_depth_for_measurement)))
    print("Number of profile events: " + str(len(export(stack_source).events)))


if PRINT_INFO:
    print("Using python " + sys.version)
    print("Samples injected cap: " + str(SAMPLES_INJECTED_CAP))

if MEMORY_INFO:
    print("Getting memory info...")
    print_stats_for(load_stack_source(samples_injected_cap=None))  # No samples cap when printing memory info

runner = pyperf.Runner()
runner.bench_func("export", export, load_stack_source())
