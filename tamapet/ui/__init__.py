"""Drawable widgets, containers, bars, images and the display screen."""