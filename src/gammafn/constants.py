"""Numeric constants from Release 2.8 of the Cephes Math Library,
(c) Stephen L. Moshier 1984, 1987, 1988, 2000.
"""

__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"

# For IEEE arithmetic (IBMPC):
MACHEP = 1.11022302462515654042e-16  # 2**-53
MAXLOG = 7.09782712893383996843e2  # log(2**1024)

PI = 3.14159265358979323846  # pi
LOGPI = 1.14472988584940017414  # log(pi)
SQTPI = 2.50662827463100050242e0  # sqrt(2*pi)
LS2PI = 0.91893853320467274178  # log(sqrt(2*pi))
EULER = 0.57721566490153286061  # Euler-Mascheroni constant

MAXGAM = 171.624376956302725  # largest argument for which gamma() is finite
MAXLGM = 2.556348e305  # largest argument for which log_gamma() is finite
MAXSTIR = 143.01608  # above this stirling() splits the power to avoid overflow

# continued fraction convergence and rescaling
EPS = 1e-15
BIG = 4.503599627370496e15  # 2**52
BIGINV = 2.22044604925031308085e-16  # 2**-52

# default cap on series / continued fraction iterations
MAX_ITER = 10000
