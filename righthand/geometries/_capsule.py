import numpy as np
from pygfx import Geometry


def capsule_geometry(radius=1.0, length=1.0, cap_segments=4, radial_segments=8):
    """Generate a capsule.

    Creates a capsule (a cylinder with hemispherical caps) centered at the
    local origin, with its axis along the local y-axis. The cylindrical part
    is ``length`` long, so the total height is ``length + 2 * radius``.

    The surface is constructed like ``sphere_geometry``: a grid of rings from
    the top pole to the bottom pole, where the top cap is the upper half of a
    sphere moved up by ``length / 2`` and the bottom cap is the lower half
    moved down by the same amount.

    Parameters
    ----------
    radius : float
        The radius of the cylinder and the caps.
    length : float
        The length of the cylindrical middle section.
    cap_segments : int
        The number of latitudinal segments in each cap.
    radial_segments : int
        The number of segments around the axis.

    Returns
    -------
    capsule : Geometry
        A geometry object that represents the capsule.

    """

    assert cap_segments > 0
    assert radial_segments > 2
    assert length >= 0

    half_length = length / 2

    # latitude per ring, from the top pole to the bottom pole
    top = np.linspace(np.pi / 2, 0, num=cap_segments + 1)
    bottom = np.linspace(0, -np.pi / 2, num=cap_segments + 1)
    alpha = np.concatenate([top, bottom]).astype(np.float32)
    centers = np.concatenate(
        [np.full(cap_segments + 1, half_length), np.full(cap_segments + 1, -half_length)]
    ).astype(np.float32)

    nx = radial_segments + 1
    ny = len(alpha)
    phi = np.linspace(0, np.pi * 2, num=nx, dtype=np.float32)

    # grid has shape (ny, nx)
    phi_grid, alpha_grid = np.meshgrid(phi, alpha)
    center_grid = np.broadcast_to(centers[:, None], (ny, nx))

    ring = np.cos(alpha_grid)
    xx = np.cos(phi_grid) * ring * -1
    yy = np.sin(alpha_grid)
    zz = np.sin(phi_grid) * ring

    normals = np.stack([xx, yy, zz], axis=-1)
    positions = normals * radius
    positions[..., 1] += center_grid

    # v runs from 1 at the top pole to 0 at the bottom pole
    total_height = length + 2 * radius
    uu = phi_grid / (np.pi * 2)
    vv = (positions[..., 1] + total_height / 2) / total_height
    texcoords = np.stack([uu, vv], axis=-1)

    idx = np.arange(nx * ny, dtype=np.uint32).reshape((ny, nx))
    n_rows = ny - 1
    indices = np.empty((n_rows, radial_segments, 2, 3), dtype=np.uint32)
    indices[:, :, 0, 0] = idx[
        np.arange(n_rows)[:, None], np.arange(radial_segments)[None, :]
    ]
    indices[:, :, 0, 1] = indices[:, :, 0, 0] + nx
    indices[:, :, 0, 2] = indices[:, :, 0, 0] + 1
    indices[:, :, 1, 0] = indices[:, :, 0, 0] + nx + 1
    indices[:, :, 1, 1] = indices[:, :, 1, 0] - nx
    indices[:, :, 1, 2] = indices[:, :, 1, 0] - 1

    return Geometry(
        indices=indices.reshape((-1, 3)),
        positions=positions.reshape((-1, 3)).astype(np.float32),
        normals=normals.reshape((-1, 3)).astype(np.float32),
        texcoords=texcoords.reshape((-1, 2)).astype(np.float32),
    )
