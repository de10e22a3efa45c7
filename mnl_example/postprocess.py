# %%
import matplotlib.pyplot as plt
import numpy as np
import sys
sys.path.append('../')
from BayesMNL.chain_io import load_chain
from BayesMNL.summary import summarize, format_summary
from BayesMNL.diagnostics import plot_trace_hist

# %%
chain, labels = load_chain("mnl_chain.h5")
betas_inj = np.array([1.0, 0.5, -0.8, -0.1])

print(f"status: {chain.status}, draws: {chain.num_samples}, acceptance rate: {chain.acceptance_rate}")

# %%
# plot log-posterior
plt.figure()
plt.plot(chain.get_lnposts())
plt.xlabel('step')
plt.ylabel('log-posterior')
plt.savefig('lnpost.pdf')

# %%
discard = int(chain.num_samples * 0.1)

summary = summarize(chain.get_samples(), burn_in=discard)
print(format_summary(summary, labels=labels, truths=betas_inj))

# posterior mass on the wrong side of zero
kept = chain.get_samples(burn_in=discard)
for label, col, truth in zip(labels, kept.T, betas_inj):
    print(f"{label}: P(sign differs from truth) = {np.mean(np.sign(col) != np.sign(truth)):.4f}")

# %%
fig = plot_trace_hist(chain.get_samples(), labels=labels, burn_in=discard, truths=betas_inj)
fig.savefig('trace_postprocess.pdf')
plt.close('all')
