"""Number-theoretic transforms, the wavelet transform and in-place matrix transposition."""