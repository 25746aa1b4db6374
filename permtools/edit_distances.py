import math
from .checks import ensure_same_length, ensure_non_negative
from .measure import DistanceMeasure


class ReinsertionDistance(DistanceMeasure):
	"""Minimum number of remove-and-reinsert operations transforming ``p1``
	into ``p2``.

	This is ``n`` minus the length of the longest common subsequence of the
	two permutations. Since the elements are distinct, the LCS reduces to a
	longest increasing subsequence of the positions in ``p2`` of the elements
	of ``p1``, found by patience sorting in O(n log n).

	"""
	def distance(self,p1,p2):
		ensure_same_length(p1,p2)
		return len(p1) - self.lcs(p1,p2)


	def max(self,length):
		if length <= 1:
			return 0
		return length - 1


	def lcs(self,p1,p2):
		"""Length of the longest common subsequence of ``p1`` and ``p2``."""
		n = len(p1)
		inv2 = p2.get_inverse()
		# thresh[k] is the smallest tail of a common subsequence of length k.
		thresh = [n]*(n+1)
		thresh[0] = -1
		max_k = 0
		for v in p1.to_array():
			j = inv2[v]
			k = _search(thresh,j,0,max_k+1)
			thresh[k] = j
			if k > max_k:
				max_k = k
		return max_k


def _search(thresh,value,low,high):
	"""Find k in [low, high] with ``thresh[k-1] < value <= thresh[k]``."""
	while low < high:
		mid = (low+high) >> 1
		if value <= thresh[mid] and value > thresh[mid-1]:
			return mid
		elif value > thresh[mid]:
			low = mid + 1
		else:
			high = mid - 1
	return low


class EditDistance(DistanceMeasure):
	"""String edit distance between permutations, with configurable costs.

	Computed by the usual O(nm) dynamic program. Unlike the other measures it
	accepts permutations of different lengths. With the default costs
	(insertion and deletion 0.5, no direct changes) it equals
	``ReinsertionDistance``, only slower.

	Args:
		insert_cost (float): Cost of inserting an element.
		delete_cost (float): Cost of deleting an element.
		change_cost (float): Cost of changing an element into another.

	"""
	def __init__(self,insert_cost=0.5,delete_cost=0.5,change_cost=math.inf):
		ensure_non_negative(insert_cost,"insert_cost")
		ensure_non_negative(delete_cost,"delete_cost")
		ensure_non_negative(change_cost,"change_cost")
		self.insert_cost = insert_cost
		self.delete_cost = delete_cost
		self.change_cost = change_cost


	def distance(self,p1,p2):
		a1 = p1.to_array()
		a2 = p2.to_array()
		n = len(a1)
		m = len(a2)
		if n == m and n <= 1:
			return 0.0
		D = [[0.0]*(m+1) for i in range(n+1)]
		for i in range(1,n+1):
			D[i][0] = D[i-1][0] + self.delete_cost
		for j in range(1,m+1):
			D[0][j] = D[0][j-1] + self.insert_cost
		for i in range(1,n+1):
			for j in range(1,m+1):
				if a1[i-1] == a2[j-1]:
					change = D[i-1][j-1]
				else:
					change = D[i-1][j-1] + self.change_cost
				D[i][j] = min(change,
							  D[i-1][j] + self.delete_cost,
							  D[i][j-1] + self.insert_cost)
		return D[n][m]
