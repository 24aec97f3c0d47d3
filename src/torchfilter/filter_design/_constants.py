"""Constants for filter design module."""

# Number of descending Landen transformations used to evaluate the elliptic
# functions cd and sn. The modulus converges quadratically, so seven steps
# reach double precision for every modulus an elliptic design produces.
LANDEN_ITERATIONS: int = 7

# Upper bound on the ascending iteration that inverts sn. The iteration stops
# as soon as two successive iterates compare equal, which happens after about
# a dozen steps for valid moduli.
ASNE_MAX_ITERATIONS: int = 100

# Kaiser window FIR design defaults
KAISER_ATTENUATION_DB: float = 60.0

# Arbitrary rate resampling defaults
RESAMPLE_NUM_PHASES: int = 32
RESAMPLE_TRANSITION_RATIO: float = 0.2

# Sampling frequency at which normalized frequencies put Nyquist at 1
NORMALIZED_SAMPLING_FREQUENCY: float = 2.0
