"""Argument validation shared by ``Permutation`` and the distance measures.

Each helper raises immediately with a message naming the offending argument,
so that callers fail before any state is mutated.

"""


def ensure_index(i,size,name="index"):
	"""Ensure 0 <= i < size."""
	if not (0 <= i < size):
		raise IndexError("{} out of range: 0 <= {} < {}, got {}".format(name,name,size,i))


def ensure_non_negative(x,name="value"):
	"""Ensure x >= 0. NaN is rejected; infinity is allowed."""
	if not x >= 0:
		raise ValueError("{} must be non-negative, got {}".format(name,x))


def ensure_same_length(p1,p2):
	"""Ensure two permutations have the same length."""
	if len(p1) != len(p2):
		raise ValueError("Permutations must be the same length: {} != {}".format(len(p1),len(p2)))


def ensure_length(p,length,name="permutation"):
	if len(p) != length:
		raise ValueError("{} must have length {}, got {}".format(name,length,len(p)))


def ensure_max_length(n,limit,name="length"):
	"""Ensure 0 <= n <= limit."""
	if n < 0 or n > limit:
		raise ValueError("{} must be in [0, {}], got {}".format(name,limit,n))


def ensure_permutation(values):
	"""Ensure ``values`` is a bijection on {0,...,len(values)-1}.

	Raises:
		ValueError: if an element is negative, too large, or repeated.

	"""
	n = len(values)
	seen = [False]*n
	for v in values:
		if v < 0 or v >= n:
			raise ValueError("Elements must be in interval [0, {}), got {}".format(n,v))
		if seen[v]:
			raise ValueError("Duplicate elements are not allowed: {}".format(v))
		seen[v] = True
