'''Script to simulate conjoint choices among streaming offers under a multinomial logit.'''


import numpy as np
import jax.numpy as jnp
import jax.random as jr
import matplotlib.pyplot as plt

from simulate_data.data_structure import Conjoint_Data, BRANDS, ADS

# default part-worths: Netflix, Prime (Hulu baseline), ads (no ads baseline), price per dollar
default_betas = jnp.array([1.0, 0.5, -0.8, -0.1])

# monthly prices shown to respondents
default_prices = jnp.arange(8, 33, 4)


# simulate choices of each respondent across tasks
def sim_conjoint(betas=default_betas,  # true part-worths
                 num_respondents=100,  # respondents surveyed
                 num_tasks=10,  # choice tasks per respondent
                 num_alts=3,  # alternatives per task
                 prices=default_prices,  # price levels
                 random_seed=123,  # random seed
                 plot=False  # plot choice shares by brand and price
                 ):

    # make random keys for attributes and utility shocks
    brand_key, ad_key, price_key, noise_key = jr.split(jr.PRNGKey(random_seed), 4)

    # attributes of every alternative shown
    Nrows = num_respondents * num_tasks * num_alts
    brand_ndx = jr.choice(brand_key, BRANDS.shape[0], shape=(Nrows,))
    ad_ndx = jr.choice(ad_key, ADS.shape[0], shape=(Nrows,))
    price = jr.choice(price_key, jnp.asarray(prices), shape=(Nrows,))

    # deterministic utility plus standard Gumbel shock
    X = jnp.stack([(brand_ndx == 0).astype(float),
                   (brand_ndx == 1).astype(float),
                   (ad_ndx == 0).astype(float),
                   price.astype(float)], axis=1)
    utility = X @ jnp.asarray(betas) + jr.gumbel(noise_key, shape=(Nrows,))

    # alternative with highest utility is chosen in each task
    best = jnp.argmax(utility.reshape(-1, num_alts), axis=1)
    choice = jnp.zeros((Nrows // num_alts, num_alts), dtype=int).at[jnp.arange(Nrows // num_alts), best].set(1)

    resp = np.repeat(np.arange(1, num_respondents + 1), num_tasks * num_alts)
    task = np.tile(np.repeat(np.arange(1, num_tasks + 1), num_alts), num_respondents)
    data = Conjoint_Data(resp, task, BRANDS[np.asarray(brand_ndx)], ADS[np.asarray(ad_ndx)],
                         np.asarray(price), np.asarray(choice).ravel(), num_alts=num_alts)

    if plot:

        # choice share by brand
        plt.figure(figsize=(12, 5))
        plt.subplot(1, 2, 1)
        plt.bar(list(data.brand_shares.keys()), list(data.brand_shares.values()), color='C0')
        plt.xlabel('brand')
        plt.ylabel('share of choices')

        # choice probability by price level
        plt.subplot(1, 2, 2)
        levels = np.unique(data.price)
        plt.plot(levels, [np.mean(data.choice[data.price == p]) for p in levels], 'o-', color='C1')
        plt.xlabel('price [$]')
        plt.ylabel('probability chosen')
        plt.show()

    return data
