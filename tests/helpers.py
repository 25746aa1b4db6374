"""Shared routines for the distance measure tests."""
import random
from permtools import Permutation


def brute_force_max(d,n):
	"""Largest distance from the identity to any permutation of length n.

	Every measure here is invariant under relabelling the elements of both
	arguments, so fixing p1 to the identity covers all pairs.
	"""
	best = 0
	p1 = Permutation(n,0)
	for p2 in p1:
		best = max(best,d.distance(p1,p2))
	return best


def brute_force_max_normalized(d,n):
	best = 0
	p1 = Permutation(n,0)
	for p2 in p1:
		best = max(best,d.normalized_distance(p1,p2))
	return best


def sample_pairs(n,count=20,seed=0):
	rng = random.Random(seed)
	return [(Permutation(n,rng=rng),Permutation(n,rng=rng)) for i in range(count)]


def naive_kendall_tau(p1,p2):
	count = 0
	inv1 = p1.get_inverse()
	inv2 = p2.get_inverse()
	n = len(p1)
	for i in range(n-1):
		for j in range(i+1,n):
			if (inv1[i]-inv1[j])*(inv2[i]-inv2[j]) < 0:
				count += 1
	return count
