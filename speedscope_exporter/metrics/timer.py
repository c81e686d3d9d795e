from speedscope_exporter.metrics.metric import Metric


class Timer:
    """
    Keeps the timings of the export stages, keyed by metric name.
    """

    def __init__(self):
        self.metrics = {}

    def record(self, name, value):
        metric = self.metrics.get(name)
        if metric is None:
            metric = self.metrics[name] = Metric()
        metric.add(value)

    def reset(self):
        self.metrics = {}

    def get_metric(self, name):
        return self.metrics.get(name)

    def as_dict(self):
        return {name: metric.as_dict() for name, metric in self.metrics.items()}
