"""strala: string art マンダラの幾何エンジン。"""

__version__ = "0.1.0"
