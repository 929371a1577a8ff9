# tools/smoke_rescale.py
import numpy as np
from spectral_rescale import OrderOutOfRange, rescale, rescale_ranked
from spectral_rescale.transform import forward, inverse

def main() -> None:
    i = np.arange(8)
    ref_e = np.sin(2.0 * np.pi * i / 8.0)
    ref_c = np.array([1.0, 1.0, 1.0, 1.0])
    tgt_c = np.array([2.0, 2.0, 2.0, 2.0])

    x = np.random.default_rng(0).normal(size=33)
    assert np.allclose(inverse(forward(x), x.size), x)

    assert np.allclose(rescale(ref_e, ref_c, tgt_c, order=0), ref_e)
    assert np.allclose(rescale(ref_e, ref_c, ref_c), ref_e)
    assert np.allclose(rescale(ref_e, ref_c, tgt_c, order=1), ref_e + 1.0)
    assert np.allclose(rescale_ranked(tgt_c, ref_e, ref_c, order=1), ref_e + 1.0)

    try:
        rescale(ref_e, ref_c, tgt_c, order=4)
    except OrderOutOfRange:
        pass
    else:
        raise AssertionError("order=4 should be out of range for 3 bins")

    print("OK: rescale smoke test passed.")

if __name__ == "__main__":
    main()
