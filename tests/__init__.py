"""
Hilbert Curves PyTorch Test Suite

- test_hilbert_curve / test_peano_curve: scalar mappers, both index widths
- test_batch_mapping: vectorised mapping on tensors
- test_validation: grid-shape classification and range checks
- test_curve_ordering: whole-curve helpers and the pattern cache
- test_factory: configuration and curve selection
"""
