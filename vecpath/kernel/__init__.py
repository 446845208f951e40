"""Ambient services: message channels, persistent settings and helpers."""

from .channel import *
from .functions import *
from .settings import *
