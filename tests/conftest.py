import os
import sys

import matplotlib

# Figures are drawn off-screen during tests
matplotlib.use('Agg')

# Ensure the repository root is on sys.path so imports like `import prefilter` work
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
