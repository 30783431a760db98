"""Canvas, block shapes, gradients and image encoders for raster rendering of module grids."""