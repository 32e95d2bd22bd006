"""Integer StableSwap kernels: invariant solvers, exact-in swaps and LP mint/burn."""
