"""Photosynthesis board engine.

Two subsystems live here:

* The rules engine (:mod:`photosynthesis.board` plus the pure functions in
  :mod:`photosynthesis.systems`) which plants, grows and harvests plants on a
  hexagonal board and scores light points against a rotating sun.
* The layered raster renderer (:mod:`photosynthesis.renderer`) which draws
  coloured character graphics onto named layers and flattens them for the
  terminal.

Every operation takes a frozen value and returns a new one.
"""
