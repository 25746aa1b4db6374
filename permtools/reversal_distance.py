from math import factorial
from tqdm import tqdm
from .checks import ensure_length, ensure_max_length
from .measure import DistanceMeasure
from .permutation_tools import factorial_rank, factorial_unrank, relabel


# n! bytes of table; beyond 12 this no longer fits in memory.
MAX_REVERSAL_LENGTH = 12
UNLABELLED = 0x7f


class ReversalDistance(DistanceMeasure):
	"""Minimum number of subsequence reversals transforming ``p1`` into ``p2``.

	Computing reversal distance is NP-hard, so the instance instead
	precomputes the exact distance from the identity to every permutation of
	one fixed length ``n``, by breadth-first search over reversals. The table
	holds one byte per permutation, indexed by rank, and is owned by the
	instance. A query relabels ``p2`` through the inverse of ``p1`` and looks
	up the rank of the result, in O(n^2).

	Warning:
		Construction takes O(n! n^3) time and n! bytes of memory. This is a
		hard ceiling: lengths above 12 are rejected, and lengths above 9 take
		a long time to build. Pass ``progress=True`` to follow the build.

	Args:
		n (int): The permutation length supported, ``0 <= n <= 12``.
		progress (bool): Whether to display a ``tqdm`` progress bar while the
			table is built.

	"""
	def __init__(self,n=5,progress=False):
		ensure_max_length(n,MAX_REVERSAL_LENGTH,"n")
		self.n = n
		size = factorial(n)
		table = bytearray([UNLABELLED])*size
		table[0] = 0
		labelled = 1
		d = 0
		with tqdm(total=size,desc="Reversal distances",disable=not progress) as bar:
			bar.update(1)
			while labelled < size:
				found = 0
				e = table.find(d)
				while e != -1:
					p = factorial_unrank(n,e)
					for i in range(n-1):
						for j in range(i+1,n):
							p[i:j+1] = p[i:j+1][::-1]
							v = factorial_rank(p)
							p[i:j+1] = p[i:j+1][::-1]
							if table[v] == UNLABELLED:
								table[v] = d + 1
								found += 1
					e = table.find(d,e+1)
				labelled += found
				bar.update(found)
				d += 1
		self._table = table


	def supported_length(self):
		return self.n


	def distance(self,p1,p2):
		ensure_length(p1,self.n,"p1")
		ensure_length(p2,self.n,"p2")
		return self._table[factorial_rank(relabel(p1.to_array(),p2.to_array()))]


	def max(self,length):
		if length <= 1:
			return 0
		return length - 1
