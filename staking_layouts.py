"""
Storage layouts and bundled constants of the PoS staking contract versions

Each version pins the slot numbers of the contract's state variables, the
stake credited to every bootstrap validator and the runtime bytecode placed
at the contract address in genesis. Slot numbers come from the contract's
declaration order and are never derived here.
"""

from dataclasses import dataclass
from typing import Dict

DEFAULT_MIN_VALIDATOR_COUNT = 1
DEFAULT_MAX_VALIDATOR_COUNT = 2 ** 53 - 1  # max safe JS integer

STAKING_CONTRACT_ADDRESS = "0x0000000000000000000000000000000000001001"

DEFAULT_VERSION = "v1"


@dataclass(frozen=True)
class StorageLayout:
    validators_slot: int                 # address[] _validators
    is_validator_slot: int               # mapping(address => bool)
    staked_amount_by_address_slot: int   # mapping(address => uint256)
    validator_index_slot: int            # mapping(address => uint256)
    staked_amount_slot: int              # uint256 _stakedAmount
    min_validator_count_slot: int        # uint256 _minimumNumValidators
    max_validator_count_slot: int        # uint256 _maximumNumValidators


@dataclass(frozen=True)
class StakingContractVersion:
    tag: str
    bytecode: str
    default_staked_balance: str
    layout: StorageLayout


V1_LAYOUT = StorageLayout(
    validators_slot=0,
    is_validator_slot=1,
    staked_amount_by_address_slot=2,
    validator_index_slot=3,
    staked_amount_slot=4,
    min_validator_count_slot=5,
    max_validator_count_slot=6,
)

V1_DEFAULT_STAKED_BALANCE = "0x8AC7230489E80000"  # 10 ETH

# Deployed runtime code of the PoS staking contract (solc 0.8.7)
V1_BYTECODE = (
    "0x608060405234801561001057600080fd5b50600436106101165760003560e01c8063ad"
    "c9772e116100a2578063ca1e781911610071578063ca1e7819146102f7578063e387a7ed"
    "14610315578063e804fbf614610333578063f90ecacc14610351578063facd743b146103"
    "8157610116565b8063adc9772e14610283578063af6da36e1461029f578063c2a672e014"
    "6102bd578063c795c077146102d957610116565b80636588103b116100e9578063658810"
    "3b146101c9578063714ff425146101e75780637a6eea37146102055780637dceceb81461"
    "0223578063940670451461025357610116565b806302b751991461011b578063065ae171"
    "1461014b5780632367f6b51461017b578063373d6132146101ab575b600080fd5b610135"
    "600480360381019061013091906112c5565b6103b1565b60405161014291906116f6565b"
    "60405180910390f35b610165600480360381019061016091906112c5565b6103c9565b60"
    "405161017291906115c5565b60405180910390f35b610195600480360381019061019091"
    "906112c5565b6103e9565b6040516101a291906116f6565b60405180910390f35b6101b3"
    "610432565b6040516101c091906116f6565b60405180910390f35b6101d161043c565b60"
    "40516101de91906115e0565b60405180910390f35b6101ef610460565b6040516101fc91"
    "906116f6565b60405180910390f35b61020d61046a565b60405161021a91906116db565b"
    "60405180910390f35b61023d600480360381019061023891906112c5565b61046f565b60"
    "405161024a91906116f6565b60405180910390f35b61026d600480360381019061026891"
    "9061135f565b610487565b60405161027a9190611551565b60405180910390f35b61029d"
    "6004803603810190610298919061131f565b6104ba565b005b6102a7610528565b604051"
    "6102b491906116f6565b60405180910390f35b6102d760048036038101906102d2919061"
    "131f565b61052e565b005b6102e161061e565b6040516102ee91906116f6565b60405180"
    "910390f35b6102ff610624565b60405161030c91906115a3565b60405180910390f35b61"
    "031d6106b2565b60405161032a91906116f6565b60405180910390f35b61033b6106b856"
    "5b60405161034891906116f6565b60405180910390f35b61036b60048036038101906103"
    "66919061135f565b6106c2565b6040516103789190611551565b60405180910390f35b61"
    "039b600480360381019061039691906112c5565b610701565b6040516103a891906115c5"
    "565b60405180910390f35b60056020528060005260406000206000915090505481565b60"
    "036020528060005260406000206000915054906101000a900460ff1681565b6000600460"
    "008373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffff"
    "ffffffffffffffffff168152602001908152602001600020549050919050565b60006006"
    "54905090565b60008054906101000a900473ffffffffffffffffffffffffffffffffffff"
    "ffff1681565b6000600754905090565b600181565b600460205280600052604060002060"
    "00915090505481565b60016020528060005260406000206000915054906101000a900473"
    "ffffffffffffffffffffffffffffffffffffffff1681565b6104d93373ffffffffffffff"
    "ffffffffffffffffffffffffff16610757565b15610519576040517f08c379a000000000"
    "00000000000000000000000000000000000000000000000081526004016105109061169b"
    "565b60405180910390fd5b61052433838361077a565b5050565b60085481565b61054d33"
    "73ffffffffffffffffffffffffffffffffffffffff16610757565b1561058d576040517f"
    "08c379a00000000000000000000000000000000000000000000000000000000081526004"
    "016105849061169b565b60405180910390fd5b6000600460003373ffffffffffffffffff"
    "ffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff168152"
    "602001908152602001600020541161060f576040517f08c379a000000000000000000000"
    "00000000000000000000000000000000000081526004016106069061161b565b60405180"
    "910390fd5b61061a338383610a89565b5050565b60075481565b60606002805480602002"
    "6020016040519081016040528092919081815260200182805480156106a8576020028201"
    "91906000526020600020905b8160009054906101000a900473ffffffffffffffffffffff"
    "ffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff1681526020"
    "01906001019080831161065e575b5050505050905090565b60065481565b600060085490"
    "5090565b600281815481106106d257600080fd5b90600052602060002001600091505490"
    "6101000a900473ffffffffffffffffffffffffffffffffffffffff1681565b6000600360"
    "008373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffff"
    "ffffffffffffffffff16815260200190815260200160002060009054906101000a900460"
    "ff169050919050565b6000808273ffffffffffffffffffffffffffffffffffffffff163b"
    "119050919050565b816000806101000a81548173ffffffffffffffffffffffffffffffff"
    "ffffffff021916908373ffffffffffffffffffffffffffffffffffffffff160217905550"
    "8273ffffffffffffffffffffffffffffffffffffffff1660008054906101000a900473ff"
    "ffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffff"
    "ffffffffff16636352211e836040518263ffffffff1660e01b815260040161082a919061"
    "16f6565b60206040518083038186803b15801561084257600080fd5b505afa1580156108"
    "56573d6000803e3d6000fd5b505050506040513d601f19601f8201168201806040525081"
    "019061087a91906112f2565b73ffffffffffffffffffffffffffffffffffffffff161461"
    "08d0576040517f08c379a000000000000000000000000000000000000000000000000000"
    "00000081526004016108c79061167b565b60405180910390fd5b60008054906101000a90"
    "0473ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffff"
    "ffffffffffffffff166323b872dd8430846040518463ffffffff1660e01b815260040161"
    "092d9392919061156c565b600060405180830381600087803b15801561094757600080fd"
    "5b505af115801561095b573d6000803e3d6000fd5b505050508260016000838152602001"
    "90815260200160002060006101000a81548173ffffffffffffffffffffffffffffffffff"
    "ffffff021916908373ffffffffffffffffffffffffffffffffffffffff16021790555060"
    "0660008154809291906109c490611853565b9190505550600460008473ffffffffffffff"
    "ffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff16"
    "81526020019081526020016000206000815480929190610a1990611853565b9190505550"
    "610a2733610d70565b15610a3657610a3533610de1565b5b8273ffffffffffffffffffff"
    "ffffffffffffffffffff167f9e71bc8eea02a63969f509818f2dafb9254532904319f9db"
    "da79b67bd34a5f3d82604051610a7c91906116f6565b60405180910390a2505050565b81"
    "6000806101000a81548173ffffffffffffffffffffffffffffffffffffffff0219169083"
    "73ffffffffffffffffffffffffffffffffffffffff1602179055506000600460008573ff"
    "ffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffff"
    "ffffffffff1681526020019081526020016000205411610b4b576040517f08c379a00000"
    "00000000000000000000000000000000000000000000000000008152600401610b429061"
    "15fb565b60405180910390fd5b8273ffffffffffffffffffffffffffffffffffffffff16"
    "6001600083815260200190815260200160002060009054906101000a900473ffffffffff"
    "ffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffff"
    "ff1614610bb657600080fd5b600060016000838152602001908152602001600020600061"
    "01000a81548173ffffffffffffffffffffffffffffffffffffffff021916908373ffffff"
    "ffffffffffffffffffffffffffffffffff16021790555060008054906101000a900473ff"
    "ffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffff"
    "ffffffffff166323b872dd3085846040518463ffffffff1660e01b8152600401610c6693"
    "92919061156c565b600060405180830381600087803b158015610c8057600080fd5b505a"
    "f1158015610c94573d6000803e3d6000fd5b50505050600460008473ffffffffffffffff"
    "ffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff1681"
    "526020019081526020016000206000815480929190610ce890611829565b919050555060"
    "066000815480929190610d0090611829565b9190505550610d0e33610f31565b15610d1d"
    "57610d1c33610f87565b5b8273ffffffffffffffffffffffffffffffffffffffff167f0f"
    "5bb82176feb1b5e747e28471aa92156a04d9f3ab9f45f28e2d704232b93f758260405161"
    "0d6391906116f6565b60405180910390a2505050565b6000610d7b82610f31565b158015"
    "610dda575060016fffffffffffffffffffffffffffffffff16600460008473ffffffffff"
    "ffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffff"
    "ff1681526020019081526020016000205410155b9050919050565b600854600280549050"
    "10610e2a576040517f08c379a00000000000000000000000000000000000000000000000"
    "00000000008152600401610e219061163b565b60405180910390fd5b6001600360008373"
    "ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffff"
    "ffffffffffff16815260200190815260200160002060006101000a81548160ff02191690"
    "8315150217905550600280549050600560008373ffffffffffffffffffffffffffffffff"
    "ffffffff1673ffffffffffffffffffffffffffffffffffffffff16815260200190815260"
    "200160002081905550600281908060018154018082558091505060019003906000526020"
    "6000200160009091909190916101000a81548173ffffffffffffffffffffffffffffffff"
    "ffffffff021916908373ffffffffffffffffffffffffffffffffffffffff160217905550"
    "50565b6000600360008373ffffffffffffffffffffffffffffffffffffffff1673ffffff"
    "ffffffffffffffffffffffffffffffffff16815260200190815260200160002060009054"
    "906101000a900460ff169050919050565b60075460028054905011610fd0576040517f08"
    "c379a0000000000000000000000000000000000000000000000000000000008152600401"
    "610fc7906116bb565b60405180910390fd5b600280549050600560008373ffffffffffff"
    "ffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff"
    "1681526020019081526020016000205410611056576040517f08c379a000000000000000"
    "000000000000000000000000000000000000000000815260040161104d9061165b565b60"
    "405180910390fd5b6000600560008373ffffffffffffffffffffffffffffffffffffffff"
    "1673ffffffffffffffffffffffffffffffffffffffff1681526020019081526020016000"
    "20549050600060016002805490506110ae919061175b565b905080821461119d57600060"
    "0282815481106110cd576110cc6118fa565b5b9060005260206000200160009054906101"
    "000a900473ffffffffffffffffffffffffffffffffffffffff1690508060028481548110"
    "61110f5761110e6118fa565b5b9060005260206000200160006101000a81548173ffffff"
    "ffffffffffffffffffffffffffffffffff021916908373ffffffffffffffffffffffffff"
    "ffffffffffffff16021790555082600560008373ffffffffffffffffffffffffffffffff"
    "ffffffff1673ffffffffffffffffffffffffffffffffffffffff16815260200190815260"
    "200160002081905550505b6000600360008573ffffffffffffffffffffffffffffffffff"
    "ffffff1673ffffffffffffffffffffffffffffffffffffffff1681526020019081526020"
    "0160002060006101000a81548160ff0219169083151502179055506000600560008573ff"
    "ffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffff"
    "ffffffffff16815260200190815260200160002081905550600280548061124c5761124b"
    "6118cb565b5b6001900381819060005260206000200160006101000a81549073ffffffff"
    "ffffffffffffffffffffffffffffffff02191690559055505050565b6000813590506112"
    "9581611abf565b92915050565b6000815190506112aa81611abf565b92915050565b6000"
    "813590506112bf81611ad6565b92915050565b6000602082840312156112db576112da61"
    "1929565b5b60006112e984828501611286565b91505092915050565b6000602082840312"
    "1561130857611307611929565b5b60006113168482850161129b565b9150509291505056"
    "5b6000806040838503121561133657611335611929565b5b600061134485828601611286"
    "565b9250506020611355858286016112b0565b9150509250929050565b60006020828403"
    "121561137557611374611929565b5b6000611383848285016112b0565b91505092915050"
    "565b600061139883836113a4565b60208301905092915050565b6113ad8161178f565b82"
    "525050565b6113bc8161178f565b82525050565b60006113cd82611721565b6113d78185"
    "611739565b93506113e283611711565b8060005b838110156114135781516113fa888261"
    "138c565b97506114058361172c565b9250506001810190506113e6565b50859350505050"
    "92915050565b611429816117a1565b82525050565b611438816117f3565b82525050565b"
    "600061144b60198361174a565b91506114568261192e565b602082019050919050565b60"
    "0061146e601d8361174a565b915061147982611957565b602082019050919050565b6000"
    "61149160278361174a565b915061149c82611980565b604082019050919050565b600061"
    "14b460128361174a565b91506114bf826119cf565b602082019050919050565b60006114"
    "d760218361174a565b91506114e2826119f8565b604082019050919050565b60006114fa"
    "601a8361174a565b915061150582611a47565b602082019050919050565b600061151d60"
    "408361174a565b915061152882611a70565b604082019050919050565b61153c816117ad"
    "565b82525050565b61154b816117e9565b82525050565b60006020820190506115666000"
    "8301846113b3565b92915050565b600060608201905061158160008301866113b3565b61"
    "158e60208301856113b3565b61159b6040830184611542565b949350505050565b600060"
    "208201905081810360008301526115bd81846113c2565b905092915050565b6000602082"
    "0190506115da6000830184611420565b92915050565b60006020820190506115f5600083"
    "018461142f565b92915050565b600060208201905081810360008301526116148161143e"
    "565b9050919050565b6000602082019050818103600083015261163481611461565b9050"
    "919050565b6000602082019050818103600083015261165481611484565b905091905056"
    "5b60006020820190508181036000830152611674816114a7565b9050919050565b600060"
    "20820190508181036000830152611694816114ca565b9050919050565b60006020820190"
    "5081810360008301526116b4816114ed565b9050919050565b6000602082019050818103"
    "60008301526116d481611510565b9050919050565b60006020820190506116f060008301"
    "84611533565b92915050565b600060208201905061170b6000830184611542565b929150"
    "50565b6000819050602082019050919050565b600081519050919050565b600060208201"
    "9050919050565b600082825260208201905092915050565b600082825260208201905092"
    "915050565b6000611766826117e9565b9150611771836117e9565b925082821015611784"
    "5761178361189c565b5b828203905092915050565b600061179a826117c9565b90509190"
    "50565b60008115159050919050565b60006fffffffffffffffffffffffffffffffff8216"
    "9050919050565b600073ffffffffffffffffffffffffffffffffffffffff821690509190"
    "50565b6000819050919050565b60006117fe82611805565b9050919050565b6000611810"
    "82611817565b9050919050565b6000611822826117c9565b9050919050565b6000611834"
    "826117e9565b915060008214156118485761184761189c565b5b60018203905091905056"
    "5b600061185e826117e9565b91507fffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffff8214156118915761189061189c565b5b600182019050919050"
    "565b7f4e487b710000000000000000000000000000000000000000000000000000000060"
    "0052601160045260246000fd5b7f4e487b71000000000000000000000000000000000000"
    "00000000000000000000600052603160045260246000fd5b7f4e487b7100000000000000"
    "000000000000000000000000000000000000000000600052603260045260246000fd5b60"
    "0080fd5b7f596f752068617665206e6f20746f6b656e73207374616b6564000000000000"
    "00600082015250565b7f4f6e6c79207374616b65722063616e2063616c6c2066756e6374"
    "696f6e000000600082015250565b7f56616c696461746f72207365742068617320726561"
    "636865642066756c6c206360008201527f61706163697479000000000000000000000000"
    "00000000000000000000000000602082015250565b7f696e646578206f7574206f662072"
    "616e67650000000000000000000000000000600082015250565b7f43616e277420737461"
    "6b6520746f6b656e7320796f7520646f6e2774206f776e60008201527f21000000000000"
    "00000000000000000000000000000000000000000000000000602082015250565b7f4f6e"
    "6c7920454f412063616e2063616c6c2066756e6374696f6e000000000000600082015250"
    "565b7f56616c696461746f72732063616e2774206265206c657373207468616e20746860"
    "008201527f65206d696e696d756d2072657175697265642076616c696461746f72206e75"
    "6d602082015250565b611ac88161178f565b8114611ad357600080fd5b50565b611adf81"
    "6117e9565b8114611aea57600080fd5b5056fea2646970667358221220e8b3e605f2387d"
    "7b5c72d05600c7f8d225f80d7cbd8ad5e50c5aa00129ede67b64736f6c63430008070033"
)

STAKING_CONTRACT_VERSIONS: Dict[str, StakingContractVersion] = {
    "v1": StakingContractVersion(
        tag="v1",
        bytecode=V1_BYTECODE,
        default_staked_balance=V1_DEFAULT_STAKED_BALANCE,
        layout=V1_LAYOUT,
    ),
}
