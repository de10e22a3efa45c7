'''Save a chain's draw history to HDF5 and load it back.'''


import h5py
import numpy as np

from BayesMNL.chains import Chain


def save_chain(path, chain, labels=None):
    with h5py.File(path, 'w') as hf:
        hf.create_dataset('samples', data=chain.get_samples())
        hf.create_dataset('lnposts', data=chain.get_lnposts())
        hf.create_dataset('x0', data=chain.x0)
        hf.attrs['lnpost0'] = chain.lnpost0
        hf.attrs['accept_count'] = chain.accept_count
        hf.attrs['reject_count'] = chain.reject_count
        hf.attrs['status'] = chain.status
        hf.attrs['num_iterations'] = -1 if chain.num_iterations is None else chain.num_iterations
        if labels is not None:
            hf.attrs['labels'] = [str(label) for label in labels]


def load_chain(path):
    with h5py.File(path, 'r') as hf:
        num_iterations = int(hf.attrs['num_iterations'])
        chain = Chain(hf['x0'][()], hf.attrs['lnpost0'],
                      num_iterations=None if num_iterations < 0 else num_iterations)
        samples = hf['samples'][()]
        lnposts = hf['lnposts'][()]
        for sample, lnpost in zip(samples, lnposts):
            chain.add_sample(sample, float(lnpost))
        chain.accept_count = int(hf.attrs['accept_count'])
        chain.reject_count = int(hf.attrs['reject_count'])
        chain.status = str(hf.attrs['status'])
        labels = [str(label) for label in hf.attrs['labels']] if 'labels' in hf.attrs else None
    return chain, labels
