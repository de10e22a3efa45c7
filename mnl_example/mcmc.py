# %%
import numpy as np
import jax.numpy as jnp
import matplotlib.pyplot as plt
import sys
sys.path.append('../')
from BayesMNL import MHMCMC
from BayesMNL.mnl_models import MNL_Model
from BayesMNL.summary import summarize, format_summary
from BayesMNL.diagnostics import plot_trace_hist, plot_corner
from BayesMNL.chain_io import save_chain
from simulate_data.conjoint import sim_conjoint

# %%
# injected part-worths: Netflix, Prime, ads, price
betas_inj = jnp.array([1.0, 0.5, -0.8, -0.1])

# 100 respondents, 10 tasks each, 3 offers per task
data = sim_conjoint(betas_inj, num_respondents=100, num_tasks=10, num_alts=3, random_seed=123, plot=True)
print('tasks', data.Ntasks, 'brand shares', data.brand_shares)

# %%
# model with N(0, 5) priors on binary attributes and N(0, 1) on price
model = MNL_Model.from_data(data, prior_stdevs=[5., 5., 5., 1.])

# maximum likelihood
res = model.fit_ML()
print(res.message)
print('beta_ML', model.beta_ML)
print('stderr_ML', model.stderr_ML)

# %% [markdown]
# # MCMC

# %%
num_iterations = 11_000
burn_in = 1_000
proposal_scales = np.array([0.05, 0.05, 0.05, 0.005])

chain = MHMCMC.run(np.zeros(model.ndim),
                   model.fast_lnpost,
                   proposal_scales,
                   num_iterations,
                   random_seed=42,
                   verbose=True)
save_chain('mnl_chain.h5', chain, labels=model.labels)

# %%
summary = summarize(chain.get_samples(), burn_in=burn_in)
print(format_summary(summary, labels=model.labels, truths=betas_inj))

# compare with maximum likelihood
for label, b, lo, hi in zip(model.labels, model.beta_ML, model.lower_ML, model.upper_ML):
    print(f'{label}: ML {b:.4f} [{lo:.4f}, {hi:.4f}]')

# %%
fig = plot_trace_hist(chain.get_samples(), labels=model.labels, burn_in=burn_in, truths=np.asarray(betas_inj))
fig.savefig('mnl_trace.pdf')
fig = plot_corner(chain.get_samples(), labels=list(model.labels), truths=np.asarray(betas_inj), burn_in=burn_in)
fig.savefig('mnl_corner.pdf')
plt.close('all')
